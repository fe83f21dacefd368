# main.py
import argparse
import os
import sys

from pyfiglet import Figlet, FontNotFound

from typing import List, Optional

from app_context import AppContext
from config_validation import ConfigurationError
from dispatcher import Dispatcher
from profile_store import add_profile, load_profiles
from radio_profile import ConnectionType, RadioProfile
from radio_registry import RADIO_SENDERS, build_senders
from settings import DEFAULT_SETTINGS_FILE, load_settings
from ui_status import show_result

# On Windows terminals, force UTF-8 so icons and accents render OK.
if os.name == "nt":
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")
    except (AttributeError, OSError):
        pass

PROGRAM_NAME = "Radio Console"
CURRENT_VERSION = "1.0.0"

logger = None


def print_banner_safe(title: str = "RADIO CONSOLE"):
    """Print a nice banner, but never crash if figlet fonts are missing."""
    if os.getenv("NO_FIGLET") == "1":
        print("\n" + title + "\n")
        return
    for font in ("slant", "standard"):
        try:
            fig = Figlet(font=font, width=120)
            print(fig.renderText(title))
            return
        except FontNotFound:
            continue
    print("\n" + title + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radio-console",
        description=f"{PROGRAM_NAME}: set the frequency of a configured radio over TCP, serial or rigctl",
    )
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_FILE, help="Settings file (default: settings.yml)")
    parser.add_argument("--radios", help="Radios file, overrides radios_file from settings")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--clear-logs", action="store_true", help="Delete old log files and exit")
    parser.add_argument("--no-banner", action="store_true", help="Skip the start banner")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="List configured radios")

    p_set = sub.add_parser("set", help="Set the frequency of a radio")
    p_set.add_argument("rig_id", help="Radio identifier (rig_id)")
    p_set.add_argument("frequency", help="Frequency in Hz, sent verbatim, e.g. 14250000")

    p_add = sub.add_parser("add", help="Add a radio profile and save it")
    p_add.add_argument("--rig-id", required=True)
    p_add.add_argument("--type", required=True, dest="conn_type",
                       help=f"Connection type: {', '.join(c.value for c in ConnectionType)}")
    p_add.add_argument("--host", default="", help="TCP host")
    p_add.add_argument("--port", default="", help="TCP port")
    p_add.add_argument("--serial-port", default="", help="Serial device, e.g. /dev/ttyUSB0 or COM3")
    p_add.add_argument("--baud", type=int, default=0, help="Serial baud rate")
    p_add.add_argument("--rigctl-freq", default="", help="Informational default frequency for rigctl radios")
    p_add.add_argument("--rigctl-model", type=int, default=None, help="Hamlib model number (rigctl -l)")

    return parser


def create_context(args: argparse.Namespace) -> AppContext:
    """Load settings, start logging, load the radio profiles."""
    global logger
    settings = load_settings(args.settings)
    debug_mode = bool(args.debug or settings["logging"].get("debug", False))

    from loghandler import setup_logging
    logger, log_file = setup_logging(log_dir=settings["logging"].get("log_dir", "logs"), debug=debug_mode)

    radios_path = args.radios or settings.get("radios_file", "radios.json")
    profiles = load_profiles(radios_path)

    return AppContext(
        logger=logger,
        settings=settings,
        settings_path=args.settings,
        radios_path=radios_path,
        debug_mode=debug_mode,
        profiles=profiles,
        log_file=log_file,
    )


def cmd_list(ctx: AppContext) -> int:
    if not ctx.profiles:
        print(f"No radios configured in {ctx.radios_path}.")
        return 0
    print(f"Radios ({ctx.radios_path}):")
    for profile in ctx.profiles:
        entry = RADIO_SENDERS.get(profile.conn_type, {})
        print(f"  - {profile.describe()}  ({entry.get('label', '?')}: {entry.get('description', '')})")
    return 0


def cmd_set(ctx: AppContext, rig_id: str, frequency: str) -> int:
    dispatcher = Dispatcher(build_senders(ctx.settings))
    result = dispatcher.dispatch(ctx.profiles, rig_id, frequency)
    show_result(result)
    return 0 if result.ok else 1


def cmd_add(ctx: AppContext, args: argparse.Namespace) -> int:
    try:
        conn_type = ConnectionType.parse(args.conn_type)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    profile = RadioProfile(
        rig_id=args.rig_id,
        conn_type=conn_type,
        tcp_host=args.host,
        tcp_port=args.port,
        serial_port=args.serial_port,
        baud_rate=args.baud,
        rigctl_freq=args.rigctl_freq,
        rigctl_model=args.rigctl_model,
    )
    add_profile(ctx.profiles, profile, ctx.radios_path)
    print(f"Settings saved successfully: {profile.describe()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # --clear-logs: purge old logs and exit without running anything else
    if args.clear_logs:
        from loghandler import clear_old_logs
        try:
            log_dir = load_settings(args.settings)["logging"].get("log_dir", "logs")
        except ConfigurationError:
            log_dir = "logs"
        clear_old_logs(log_dir)
        return 0

    if args.command is None:
        parser.print_help()
        return 2

    if not args.no_banner:
        print_banner_safe("RADIO CONSOLE")

    try:
        ctx = create_context(args)
        ctx.logger.debug(f"{PROGRAM_NAME} v{CURRENT_VERSION} using {ctx.radios_path}")

        if args.command == "list":
            return cmd_list(ctx)
        if args.command == "set":
            return cmd_set(ctx, args.rig_id, args.frequency)
        return cmd_add(ctx, args)
    except ConfigurationError as e:
        if logger:
            logger.error(f"[CONFIG ERROR] {e}")
        else:
            print(f"[CONFIG ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
