import logging
import os
from typing import Mapping

import toml

import utils

CONFIGURATION_FILE_NAME = 'gengroups.toml'

DEFAULT_CONFIGURATION = {
    'layout': {
        'samples_directory': 'samples',  # Directory holding the sample tests (group 0)
        'subtask_prefix': 'subtask',     # Subtask directories are named <prefix><number>
        'max_subtask': 1000,             # Largest accepted subtask number
        'answer_suffix': '.a',           # Suffix appended to a test file name to get its answer file
        'test_name_width': 2             # Test files are named with zero padded numbers of this width
    },

    'output': {
        'format': 'ejudge',              # Name of the formatter used to render the groups
        'requires_comment': 'FIX IT'     # Comment attached to the placeholder "requires" line of subtasks
    },

    'logging': {
        'level': 'WARNING'
    }
}


def get_configuration_paths(files: list[str]) -> list[str]:
    """
    Returns a list of configuration paths to look for configuration files
    :param files: Files explicitly passed by the user (highest priority first)
    :return: List of paths to check in decreasing order of priority
    """
    configuration_paths = list(files)

    configuration_paths.append(str(os.path.join(os.getcwd(), CONFIGURATION_FILE_NAME)))

    if os.environ.get("HOME", None) is not None:
        configuration_paths.append(os.path.join(os.environ["HOME"], ".gengroups.rc"))

    configuration_paths.append("/etc/default/gengroups.conf")
    return configuration_paths


def load_configurations(files: list[str]) -> list[dict]:
    """
    Load every existing configuration file of the search path
    :param files: Files explicitly passed by the user
    :return: Parsed configurations in decreasing order of priority
    :raises toml.TomlDecodeError: If a file is not valid toml
    """
    configs = []
    for configuration_path in get_configuration_paths(files):
        if os.path.isfile(configuration_path):
            logging.debug(f"Loading configuration from {configuration_path}")
            configs.append(toml.load(configuration_path))

    return configs


class ConfigurationBasedObject(object):
    def __init__(self, config, environment='prod'):
        """
        Create a new configuration based object and supply the application configuration
        :param config: The configuration passed by the user (may contain a list in decreasing order of priority)
        :param environment: Runtime environment to use as optional suffix to configuration parameters
        """
        # Set default config as config parameters
        self.config = {}
        for key in DEFAULT_CONFIGURATION.keys():
            self.config[key] = DEFAULT_CONFIGURATION[key].copy()

        config = utils.ensure_list(config)
        for c in config[::-1]:
            for key in self.config:
                section = c.get(key, {})
                if not isinstance(section, Mapping):
                    raise ValueError(f"Configuration section '{key}' must be a table")

                for option in self.config[key]:
                    value = section.get(option, None)
                    environment_value = section.get(f'{option}_{environment}', None)
                    if environment_value is not None:
                        self.config[key][option] = environment_value
                    elif value is not None:
                        self.config[key][option] = value

        # Setup logging, records go to stderr so stdout only carries generated output
        logging.basicConfig(level=logging.DEBUG)
        self.logger = logging.getLogger()
        self.logger.setLevel(self.config['logging']['level'])

    @property
    def layout(self) -> dict:
        return self.config['layout']

    @property
    def output(self) -> dict:
        return self.config['output']
