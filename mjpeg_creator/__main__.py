"""Package entry point for ``python -m mjpeg_creator``.

WHY: Users run the tool as ``python -m mjpeg_creator frames/ out.mjpeg``
to build a stream, or ``python -m mjpeg_creator --analyze out.mjpeg`` to
inspect one.

HOW: Checks sys.argv for the ``--analyze`` flag. If present, strips it
and hands the rest to the analyze command. Otherwise, delegates to the
create command's main().
"""

import sys

if __name__ == "__main__":
    if "--analyze" in sys.argv:
        from mjpeg_creator.cli import analyze_main
        analyze_main([arg for arg in sys.argv[1:] if arg != "--analyze"])
    else:
        from mjpeg_creator.cli import main
        main()
