from __future__ import annotations
import argparse
import sys
from .core.config import Config, LoggerSettings, build_logger
from .core.models import Flag, Level, LogPanic, parse_level

def main(argv=None):
    p = argparse.ArgumentParser(description="Write log lines with optional size-based rotation")
    p.add_argument("messages", nargs="*", help="Messages to log, one line each (default: read stdin)")
    p.add_argument("-l", "--level", default="info", help="Level of the written lines")
    p.add_argument("-f", "--file", help="Log file (default: standard error)")
    p.add_argument("-s", "--max-bytes", type=int, default=None, help="Rotate the file once it reaches this size")
    p.add_argument("--stdout", action="store_true", help="Write to standard output instead of standard error")
    p.add_argument("--flags", default=None, help="Comma separated header flags, e.g. date,time,shortfile")
    p.add_argument("--mirror-stderr", action="store_true", help="Also copy every line to standard error")
    p.add_argument("--mirror-stdout", action="store_true", help="Also copy every line to standard output")
    p.add_argument("--threshold", default=None, help="Minimum level to write (overrides config)")
    p.add_argument("-c", "--config", default=None, help="Settings file (JSON)")
    args = p.parse_args(argv)

    try:
        level = parse_level(args.level)
        settings = Config(args.config).settings if args.config else LoggerSettings(level="debug")
        overrides = {}
        if args.file:
            overrides.update(target="file", file=args.file)
        elif args.stdout:
            overrides["target"] = "stdout"
        if args.max_bytes is not None:
            overrides["max_bytes"] = args.max_bytes
        if args.flags is not None:
            overrides["flags"] = [f for f in args.flags.split(",") if f.strip()]
        if args.threshold is not None:
            overrides["level"] = args.threshold
        if overrides:
            settings = LoggerSettings(**{**settings.model_dump(), **overrides})
        flags = settings.flag_value()
        if args.mirror_stderr:
            flags |= Flag.MIRROR_STDERR
        if args.mirror_stdout:
            flags |= Flag.MIRROR_STDOUT
    except ValueError as e:
        p.error(str(e))

    try:
        logger = build_logger(settings)
    except OSError as e:
        p.error(f"cannot open log file: {e}")
    logger.set_flags(flags)
    lines = args.messages or (l.rstrip("\n") for l in sys.stdin)
    status = 0
    try:
        for line in lines:
            if level is Level.PANIC:
                logger.panic("%s", line)
            elif level is Level.FATAL:
                logger.fatal("%s", line)
            else:
                result = logger.emit(level, line)
                if result is not None and result.error is not None:
                    print(f"write failed: {result.error}", file=sys.stderr)
                    status = 1
    except LogPanic:
        status = 2
    finally:
        logger.close()
    return status

if __name__ == "__main__":
    sys.exit(main())
