"""
EnvReader: typed access to process environment variables.

Provides centralized, validated reads of configuration from ``os.environ``.

Usage:
    from EnvReader import int_var, bool_var, required_var
    port = int_var('PORT', 8080)
    debug = bool_var('DEBUG', False)
    db_url = required_var(['DATABASE_URL', 'DB_URL'])

    from EnvReader import constants_time as time_units
    timeout_ms = 30 * time_units.SECONDS
"""

from EnvReader.constants_time import (
    DAYS,
    HOURS,
    MINUTES,
    SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from EnvReader.env_vars import (
    HostPort,
    array_var,
    bool_var,
    check_int,
    host_ports_var,
    int_var,
    optional_var,
    required_var,
    trust_proxy_var,
)
from EnvReader.exceptions import (
    EnvCheckError,
    EnvError,
    EnvValidationError,
    InvalidArgumentError,
    InvalidFormatError,
    InvalidValueError,
    MissingVariableError,
)
from EnvReader.health_check import EnvCheckResult, EnvRequirement, run_env_check
from EnvReader.logger import get_logger, setup_logging

# Make constants module easily accessible
from EnvReader import constants_time

__all__ = [
    'optional_var',
    'required_var',
    'check_int',
    'int_var',
    'bool_var',
    'array_var',
    'host_ports_var',
    'trust_proxy_var',
    'HostPort',
    'SECONDS',
    'MINUTES',
    'HOURS',
    'DAYS',
    'SECONDS_PER_HOUR',
    'SECONDS_PER_MINUTE',
    'SECONDS_PER_DAY',
    'constants_time',
    'EnvError',
    'EnvValidationError',
    'MissingVariableError',
    'InvalidArgumentError',
    'InvalidFormatError',
    'InvalidValueError',
    'EnvCheckError',
    'EnvRequirement',
    'EnvCheckResult',
    'run_env_check',
    'get_logger',
    'setup_logging',
]
