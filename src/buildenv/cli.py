"""Command line entry point: print the resolved build environment as JSON.

Usage:
    buildenv --mode production --public-url /static
    buildenv --app-dir ./web --format raw
    buildenv --format paths

Environment Variables:
    NODE_ENV              Mode label (required unless --mode is given)
    BUILDENV_APP_DIR      Project root (overridden by --app-dir)
    BUILDENV_LOG_LEVEL    Diagnostics level, written to stderr
"""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import List, Optional

from buildenv.bootstrap import BuildEnvironment
from buildenv.config.context import EnvironmentContext
from buildenv.config.settings import EnvSettings
from buildenv.exceptions import BuildEnvError
from buildenv.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildenv",
        description="Resolve layered dotenv files and print the client build environment.",
    )
    parser.add_argument("--public-url", default=None, help="Public asset root (default: served path)")
    parser.add_argument("--app-dir", type=Path, default=None, help="Project root directory")
    parser.add_argument("--mode", default=None, help="Mode label, used only when the mode variable is unset")
    parser.add_argument(
        "--format",
        choices=["raw", "stringified", "paths"],
        default="stringified",
        help="What to print (default: stringified)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = EnvSettings.from_env()
    if args.app_dir is not None:
        settings = dataclasses.replace(settings, app_directory=args.app_dir)

    context = EnvironmentContext.from_os_environ()
    if args.mode:
        context.set_default(settings.mode_var, args.mode)

    build_env = BuildEnvironment(context=context, settings=settings, logger=get_logger())
    try:
        build_env.load_environment()
        paths = build_env.compute_paths()
    except BuildEnvError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.format == "paths":
        output = {field.name: getattr(paths, field.name) for field in dataclasses.fields(paths)}
        print(json.dumps(output, indent=2, default=str))
        return 0

    public_url = args.public_url if args.public_url is not None else paths.served_path.rstrip("/")
    client = build_env.client_environment(public_url)
    output = client.raw if args.format == "raw" else client.stringified
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
