# src/incfix/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from incfix.config import FALLBACK_HEADER
from incfix.core.fixer import IncludeFixer
from incfix.core.scanner import SourceScanner

def create_arg_parser():
    return argparse.ArgumentParser(
        prog="incfix",
        description=(
            "Rewrite '#include \"...\"' lines of *.cpp and *.h files in the current "
            f"directory that point at a missing file so they include '{FALLBACK_HEADER}' instead."
        ),
    )

def main(argv=None):
    try:
        parser = create_arg_parser()
        parser.parse_args(argv)

        # 相对路径扫描，诊断信息中的文件名保持与目录列表一致
        root_dir = Path(os.curdir)
        fixer = IncludeFixer(root_dir)

        # I/O errors propagate and abort the run
        for path in SourceScanner(root_dir).scan():
            fixer.fix(path)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

if __name__ == "__main__":
    main()
