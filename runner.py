import sys
import logging
import argparse

from toml import TomlDecodeError

from config import load_configurations
from errors import GroupsError, UsageError
from formatters.formatter_factory import FORMATS
from generator import GroupGenerator


class ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser reporting usage problems as UsageError instead of exiting
    """

    def error(self, message):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="gengroups",
                            description="Generate scoring group descriptions for a directory of contest tests")
    parser.add_argument("-e", "--environment", help="Runtime environment (prod by default)",
                        default="prod", action="store", type=str)
    parser.add_argument("-c", "--config", help="Additional configuration file (may be repeated)",
                        default=[], action="append", dest="config_files")
    parser.add_argument("-f", "--format", help="Output format (taken from the configuration by default)",
                        default=None, choices=FORMATS, dest="output_format")
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout",
                        default=None, action="store", type=str)
    parser.add_argument("test_directory", nargs="?", help="Directory holding samples and subtask directories")
    parser.add_argument("specs", nargs="*",
                        help="Score of each subtask, optionally followed by the flags h, +, s and t")
    return parser


def main(argv=None) -> int:
    """
    Run the generator on the given command line
    :param argv: Full command line including the program name (sys.argv by default)
    :return: Process exit status
    """
    if argv is None:
        argv = sys.argv

    try:
        arguments = build_parser().parse_intermixed_args(argv[1:])
        if arguments.test_directory is None:
            raise UsageError("not enough arguments")

        configs = load_configurations(arguments.config_files)
        generator = GroupGenerator(configs, arguments.environment)
        text = generator.run(arguments.test_directory, arguments.specs, argv, arguments.output_format)
    except TomlDecodeError as tde:
        logging.error("Configuration is not a valid toml: %s" % tde.msg)
        return 1
    except (GroupsError, ValueError) as e:
        logging.error(str(e))
        return 1

    if arguments.output:
        try:
            with open(arguments.output, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logging.error(f"Failed to write {arguments.output}: {e}")
            return 1
        logging.info(f"Group configuration written to {arguments.output}")
    else:
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
