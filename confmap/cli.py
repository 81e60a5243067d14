import argparse
import json
import logging
import sys

from .config import get_config
from .errors import ConfigFileNotFoundError, ConfigParseError
from .store import ConfigStore

config = get_config()

VERSION = config["version"]
DEFAULT_FILE_NAME = config["default_file_name"]
LOG_FORMAT = config["logging"]["format"]
DEFAULT_LOG_LEVEL = config["logging"]["default_level"]

VALUE_TYPES = {
    "value": ConfigStore.get,
    "string": ConfigStore.get_string,
    "bool": ConfigStore.get_bool,
    "int8": ConfigStore.get_int8,
    "int16": ConfigStore.get_int16,
    "int32": ConfigStore.get_int32,
    "int64": ConfigStore.get_int64,
    "float32": ConfigStore.get_float32,
    "float64": ConfigStore.get_float64,
    "string_array": ConfigStore.get_string_array,
    "int_array": ConfigStore.get_int_array,
    "float_array": ConfigStore.get_float_array,
    "array": ConfigStore.get_array,
    "map": ConfigStore.get_map,
}


def setup_logging(log_level=logging.WARNING, log_file=None):
    """Set up logging configuration, avoid adding multiple handlers."""
    logger = logging.getLogger()
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger.setLevel(log_level)


def load_store(file_name, search_path):
    """Build a store for the given file and load it, exiting on failure."""
    store = ConfigStore(file_name=file_name, search_path=search_path or "")
    try:
        store.load(strict=True)
    except (ConfigFileNotFoundError, ConfigParseError) as e:
        logging.error(str(e))
        sys.exit(1)
    return store


def add_common_arguments(parser):
    parser.add_argument("-f", "--file_name", default=DEFAULT_FILE_NAME, help=f"Config file name (default: {DEFAULT_FILE_NAME})")
    parser.add_argument("-p", "--search_path", default=None, help="Directory searched first for the config file")
    parser.add_argument("--log-level", help="Set the logging level", default=DEFAULT_LOG_LEVEL)
    parser.add_argument("--log-file", help="Set the log output file", default=None)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="confmap", description="confmap: inspect a JSON config file and read typed values from it")
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {VERSION}')
    subparsers = parser.add_subparsers(dest="command")

    # Show Command
    parser_show = subparsers.add_parser("show", help="Load the config file and print every key as JSON")
    add_common_arguments(parser_show)

    # Get Command
    parser_get = subparsers.add_parser("get", help="Load the config file and print one typed value")
    add_common_arguments(parser_get)
    parser_get.add_argument("-k", "--key", help="Key to look up", required=True)
    parser_get.add_argument("-t", "--type", choices=sorted(VALUE_TYPES), default="value", help="Type to read the value as (default: value)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    log_level = getattr(logging, args.log_level.upper(), logging.WARNING)
    setup_logging(log_level=log_level, log_file=args.log_file)

    store = load_store(args.file_name, args.search_path)

    if args.command == "show":
        print(json.dumps(store.to_dict(), indent=2, sort_keys=True))
    elif args.command == "get":
        value = VALUE_TYPES[args.type](store, args.key)
        if value is None:
            logging.error("Key %r is missing or is not a %s", args.key, args.type)
            sys.exit(1)
        print(json.dumps(value))


if __name__ == "__main__":
    main()
