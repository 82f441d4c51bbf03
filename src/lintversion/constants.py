"""Constants used in the project."""

from enum import Enum


class SpecKind(Enum):
    """How a version setting asks to be resolved.

    Args:
        Enum (string): Classification of a configured version value.
    """

    DETECT = "detect"
    EXPLICIT = "explicit"
    ABSENT = "absent"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SETTINGS_SOURCE = "eslint-plugin-react"
    SETTINGS_SECTION = "react"
    DETECT = "detect"
    PACKAGE_JSON_FILE = "package.json"
    NODE_MODULES_DIR = "node_modules"
    CONFIGURATION_URL = "https://github.com/jsx-eslint/eslint-plugin-react#configuration"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    WARNING_LOGGER = "lintversion.versioning.resolver"
    YAML_EXTENSIONS = (".yaml", ".yml")


class Messages:  # pylint: disable=too-few-public-methods
    """Diagnostic templates written to the warning channel.

    The rendered text is user-visible and matched exactly by consumers, so the
    quoting (including the curly quotes) must not change.
    """

    NON_STRING_VERSION = (
        "Warning: {display} version specified in {source}-settings must be a string; "
        "got “{type_name}”"
    )
    NON_STRING_DEFAULT = (
        "Warning: default {display} version specified in {source}-settings must be a string; "
        "got “{type_name}”"
    )
    INVALID_VERSION = (
        "Warning: {display} version specified in {source}-settings must be a valid semver "
        "version, or \"detect\"; got “{raw}”"
    )
    INVALID_DEFAULT = (
        "Warning: {display} version specified in {source}-settings must be a valid semver "
        "version, or \"detect\"; got “{raw}”. Falling back to latest version as default."
    )
    NOT_INSTALLED = (
        "Warning: {display} version was set to \"detect\" in {source} settings, "
        "but the \"{package}\" package is not installed. {assumption}"
    )
    ASSUME_LATEST = "Assuming latest {display} version for linting."
    ASSUME_DEFAULT = "Assuming default {display} version for linting: \"{default}\"."
    NOT_SPECIFIED = (
        "Warning: {display} version not specified in {source} settings. "
        "See {url} ."
    )
