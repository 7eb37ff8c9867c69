"""
Typed environment variable readers.

Every call reads the live ``os.environ``; nothing is cached. A variable
set to the empty string is treated exactly like an absent one.

Usage:
    from EnvReader import int_var, host_ports_var

    port = int_var('PORT', 8080)
    redis_hosts = host_ports_var(['REDIS_HOSTS', 'REDIS_HOST'])
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Collection, List, Optional

from EnvReader.exceptions import (
    InvalidArgumentError,
    InvalidFormatError,
    InvalidValueError,
    MissingVariableError,
    VarName,
    describe_var_name,
)
from EnvReader.logger import get_logger

_logger = get_logger('EnvReader.env_vars', context={'component': 'env_vars'})

_INT_PATTERN = re.compile(r'-?[0-9]+')

# Marks a default argument the caller did not pass (None is a valid default)
_MISSING = object()


@dataclass(frozen=True)
class HostPort:
    """One ``host:port`` pairing parsed from an env var."""

    host: str
    port: int


# ============================================================================
# Lookup
# ============================================================================

def _as_var_name(var_name: VarName) -> VarName:
    """Freeze a candidate iterable so it can be scanned more than once."""
    if isinstance(var_name, (str, list, tuple)):
        return var_name
    return tuple(var_name)


def optional_var(var_name: VarName, default: Any = None) -> Any:
    """
    Fetch an env var if it exists and is not empty, otherwise return *default*.

    With a list of names the first one that is set wins.
    """
    var_name = _as_var_name(var_name)
    if isinstance(var_name, str):
        value = os.environ.get(var_name)
        if value is None or value == '':
            return default
        return value

    for name in var_name:
        value = optional_var(name)
        if value is not None:
            _logger.debug("Resolved candidate list via %s", name, extra={'var_name': describe_var_name(var_name)})
            return value
    return default


def required_var(var_name: VarName) -> str:
    """Ensure an env var exists and return its contents."""
    var_name = _as_var_name(var_name)
    value = optional_var(var_name)
    if value is None:
        raise MissingVariableError(var_name)
    return value


# ============================================================================
# Typed Readers
# ============================================================================

def check_int(s: str) -> Optional[int]:
    """
    Check that a string is a valid base-10 integer and return it if so.

    Surrounding whitespace is ignored. Signs other than a leading ``-``,
    decimal points and exponents are rejected.
    """
    if not isinstance(s, str):
        raise InvalidArgumentError('check_int', s)
    s = s.strip()
    if not _INT_PATTERN.fullmatch(s):
        return None
    return int(s, 10)


def int_var(var_name: VarName, default: Any = _MISSING) -> Any:
    """
    Fetch an env var as an integer.

    Without *default* a missing variable raises; with one (even ``None``)
    the default is returned when the variable is unset.
    """
    var_name = _as_var_name(var_name)
    if default is _MISSING:
        value = required_var(var_name)
    else:
        value = optional_var(var_name)
        if value is None:
            _logger.debug("Not set, using default", extra={'var_name': describe_var_name(var_name)})
            return default

    parsed = check_int(value)
    if parsed is None:
        raise InvalidFormatError(var_name, value, "must be a valid number if set")
    return parsed


def bool_var(var_name: VarName, default: Any = _MISSING) -> Any:
    """
    Fetch an env var as a boolean, accepting exactly ``'true'`` or ``'false'``.

    Without *default* a missing variable raises.
    """
    var_name = _as_var_name(var_name)
    if default is _MISSING:
        value = required_var(var_name)
    else:
        value = optional_var(var_name)
        if value is None:
            _logger.debug("Not set, using default", extra={'var_name': describe_var_name(var_name)})
            return default

    if value == 'false':
        return False
    if value == 'true':
        return True
    raise InvalidFormatError(
        var_name, value,
        "expected 'true' or 'false'",
        suggestion=f"Set {describe_var_name(var_name)}=true or {describe_var_name(var_name)}=false",
    )


def array_var(
    var_name: str,
    delimiter: str = ',',
    allowed_values: Optional[Collection[str]] = None,
) -> Optional[List[str]]:
    """
    Split an env var on *delimiter* into a list of strings.

    Elements are kept verbatim (no trimming). Returns None when unset.

    Args:
        var_name: A single variable name
        delimiter: Separator between elements (default: ',')
        allowed_values: If given, every element must be a member

    Raises:
        InvalidValueError: An element is not in *allowed_values*
    """
    if not isinstance(var_name, str):
        raise InvalidArgumentError('var_name', var_name)
    if not isinstance(delimiter, str) or delimiter == '':
        raise InvalidArgumentError('delimiter', delimiter, expected='non-empty str')
    if allowed_values is not None:
        # A bare str would turn membership into a substring test
        if isinstance(allowed_values, str):
            raise InvalidArgumentError('allowed_values', allowed_values, expected='collection of str')
        allowed_values = frozenset(allowed_values)

    value = optional_var(var_name)
    if value is None:
        return None

    items = value.split(delimiter)
    if allowed_values is not None:
        for item in items:
            if item not in allowed_values:
                raise InvalidValueError(var_name, item, allowed_values)
    return items


def host_ports_var(var_name: VarName, default_hosts: Optional[List[HostPort]] = None) -> List[HostPort]:
    """
    Split an env var in the format ``host1:port1, host2:port2, ...``
    into a list of HostPort pairings, in input order.
    """
    var_name = _as_var_name(var_name)
    host_pairs = optional_var(var_name)
    if host_pairs is None:
        if default_hosts is None:
            raise MissingVariableError(var_name)
        _logger.debug("Not set, using default hosts", extra={'var_name': describe_var_name(var_name)})
        return default_hosts

    result = []
    for host_pair in host_pairs.split(','):
        host, sep, maybe_port = host_pair.strip().partition(':')
        if not sep:
            raise InvalidFormatError(
                var_name, host_pair, "expected host:port",
                suggestion="Separate multiple entries with ','",
            )
        port = check_int(maybe_port)
        if port is None:
            raise InvalidFormatError(var_name, maybe_port, "invalid port")
        result.append(HostPort(host=host, port=port))
    return result


def trust_proxy_var(var_name: VarName, default: Any = None) -> Any:
    """
    Parse a "trust proxy" env var.

    ``'true'``/``'false'`` become booleans, anything containing ``.`` or
    ``:`` is returned as-is (address list), and integers become hop counts.
    *default* is only used when the variable is unset.
    """
    var_name = _as_var_name(var_name)
    trust_proxy = optional_var(var_name)
    if trust_proxy is None:
        if default is None:
            raise MissingVariableError(var_name)
        _logger.debug("Not set, using default", extra={'var_name': describe_var_name(var_name)})
        return default

    if trust_proxy == 'true':
        return True
    if trust_proxy == 'false':
        return False
    if '.' in trust_proxy or ':' in trust_proxy:
        return trust_proxy

    hops = check_int(trust_proxy)
    if hops is not None:
        return hops

    raise InvalidFormatError(
        var_name, trust_proxy,
        "expected 'true', 'false', a hop count or an address list",
    )
