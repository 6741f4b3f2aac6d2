from .configuration import AlertSubject, LaunchGateConfiguration, UpdateSubject
from .errors import ConfigurationParseError, InvalidURL, LaunchGateError, MalformedVersion, MissingAppVersion
from .gate import LaunchGate
from .memory import Memory, fingerprint, load_memory, save_memory
from .parser import parse_configuration
from .version import Ordering, Version, compare_versions

__all__ = [
    "AlertSubject",
    "ConfigurationParseError",
    "InvalidURL",
    "LaunchGate",
    "LaunchGateConfiguration",
    "LaunchGateError",
    "MalformedVersion",
    "Memory",
    "MissingAppVersion",
    "Ordering",
    "UpdateSubject",
    "Version",
    "compare_versions",
    "fingerprint",
    "load_memory",
    "parse_configuration",
    "save_memory",
]
