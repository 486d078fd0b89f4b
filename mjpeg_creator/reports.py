"""Pydantic models for batch summaries and container reports.

WHY: Both commands end by reporting what happened: how many frames went
in and out, at what resolution, and what a finished container holds.
Typed models keep the human-readable stderr summary and the ``--json``
output on stdout in sync, and give callers a stable schema.

HOW: BatchSummary is produced by StreamAssembler.summary() after a
create run; ContainerReport (with one FrameInfo per frame) is produced
by analysis.analyze_container(). Both serialize with model_dump_json().

RULES:
- All models use Field(description=...) so the JSON schema is self-documenting
- width/height are None until a baseline has been established
- Rejection counts are keyed by RejectReason value strings
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

NO_RESOLUTION = "none established"


class BatchSummary(BaseModel):
    """Result of feeding a batch of frames to one StreamAssembler."""

    output_path: str = Field(description="Path of the MJPEG container written")
    frames_submitted: int = Field(default=0, ge=0, description="Frames passed to add_frame")
    frames_accepted: int = Field(default=0, ge=0, description="Frames appended to the output")
    bytes_written: int = Field(default=0, ge=0, description="Total bytes appended to the output")
    width: Optional[int] = Field(default=None, description="Baseline frame width in pixels")
    height: Optional[int] = Field(default=None, description="Baseline frame height in pixels")
    rejections: Dict[str, int] = Field(
        default_factory=dict,
        description="Rejected frame counts keyed by rejection reason",
    )

    @property
    def frames_rejected(self) -> int:
        return self.frames_submitted - self.frames_accepted

    @property
    def resolution(self) -> str:
        """``"WxH"`` or ``"none established"`` when no frame was accepted."""
        if self.width is None or self.height is None:
            return NO_RESOLUTION
        return "{}x{}".format(self.width, self.height)


class FrameInfo(BaseModel):
    """One frame found while re-splitting a container."""

    index: int = Field(ge=0, description="Zero-based frame position in the container")
    offset: int = Field(ge=0, description="Byte offset of the frame's SOI marker")
    size: int = Field(ge=0, description="Frame length in bytes, SOI to EOI inclusive")
    width: Optional[int] = Field(default=None, description="Decoded width, if the header was found")
    height: Optional[int] = Field(default=None, description="Decoded height, if the header was found")


class ContainerReport(BaseModel):
    """Structure of an existing MJPEG container."""

    path: str = Field(description="Path of the analyzed container")
    total_bytes: int = Field(ge=0, description="Container size in bytes")
    frame_count: int = Field(ge=0, description="Number of SOI..EOI frames found")
    frames: List[FrameInfo] = Field(default_factory=list, description="Per-frame details")
    dimensions: List[str] = Field(
        default_factory=list,
        description="Distinct WxH values in order of first appearance",
    )
    binary_dump: str = Field(default="", description="xxd -b style dump of the container head")

    @property
    def is_consistent(self) -> bool:
        """True when every decodable frame shares a single resolution."""
        return len(self.dimensions) <= 1
