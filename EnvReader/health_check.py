# EnvReader/health_check.py
"""
Startup environment check.

Evaluates every expected variable up front so an operator sees all
missing or malformed settings in one report instead of one per restart.

Usage:
    # At application startup
    from EnvReader.health_check import EnvRequirement, run_env_check
    from EnvReader import int_var

    run_env_check([
        EnvRequirement('DB_HOST', 'Database host'),
        EnvRequirement('DB_PORT', 'Database port', reader=int_var),
        EnvRequirement('DB_PASSWORD', 'Database password'),
        EnvRequirement('REPORT_SENDER', 'Email sender for reports', required=False),
    ])  # Raises EnvCheckError on failures

    # Or get a detailed report
    result = run_env_check(requirements, raise_on_error=False)
    print(result.format())
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .env_vars import optional_var, required_var
from .exceptions import EnvCheckError, EnvError, EnvValidationError, VarName, describe_var_name
from .logger import get_logger

_logger = get_logger('EnvReader.health_check', context={'component': 'health_check'})

SENSITIVE_MARKERS = ("PASSWORD", "SECRET", "TOKEN", "KEY")
MAX_DISPLAY_LENGTH = 50

EnvCheck = Tuple[str, str, bool]  # (name, status, is_ok)


def is_sensitive_name(var_name: VarName) -> bool:
    """True if any candidate name looks like it holds a credential."""
    names = [var_name] if isinstance(var_name, str) else list(var_name)
    return any(marker in name.upper() for name in names for marker in SENSITIVE_MARKERS)


@dataclass(frozen=True)
class EnvRequirement:
    """One variable a host process expects at startup."""

    name: VarName
    description: str = ""
    reader: Callable[[VarName], Any] = required_var
    required: bool = True
    sensitive: Optional[bool] = None

    @property
    def is_sensitive(self) -> bool:
        if self.sensitive is None:
            return is_sensitive_name(self.name)
        return self.sensitive


@dataclass
class EnvCheckResult:
    """Result of a full environment check."""

    checks: List[EnvCheck] = field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        """True if every check passed."""
        return all(ok for _, _, ok in self.checks)

    @property
    def failures(self) -> List[EnvCheck]:
        return [check for check in self.checks if not check[2]]

    def format(self, verbose: bool = True) -> str:
        """Format the check as a human-readable report."""
        lines = []
        lines.append("=" * 70)
        lines.append("ENVIRONMENT CHECK")
        lines.append("=" * 70)

        if not self.checks:
            lines.append("⚠️  No env checks performed")
        else:
            ok_count = len(self.checks) - len(self.failures)
            lines.append(
                f"Checked {len(self.checks)} variables: {ok_count} OK, {len(self.failures)} failed"
            )
            for name, status, ok in self.checks:
                if ok and not verbose:
                    continue
                icon = "✅" if ok else "❌"
                lines.append(f"   {icon} {name}: {status}")

        lines.append("=" * 70)
        if self.is_healthy:
            lines.append("✅ ALL CHECKS PASSED")
        else:
            lines.append("❌ ENVIRONMENT INVALID - Fix issues above before starting")
        lines.append("=" * 70)

        return "\n".join(lines)


def _display_value(value: Any, sensitive: bool) -> str:
    if sensitive:
        return "***"
    text = str(value)
    if len(text) > MAX_DISPLAY_LENGTH:
        return text[:MAX_DISPLAY_LENGTH] + "..."
    return text


def check_requirement(requirement: EnvRequirement) -> EnvCheck:
    """
    Evaluate a single requirement.

    Returns:
        (name, status, is_ok) tuple
    """
    name = describe_var_name(requirement.name)
    prefix = f"{requirement.description}: " if requirement.description else ""

    if not requirement.required and optional_var(requirement.name) is None:
        return name, f"{prefix}not set (optional)", True

    try:
        value = requirement.reader(requirement.name)
    except EnvValidationError as e:
        if requirement.is_sensitive:
            return name, f"{prefix}Invalid value for '{name}': ***\n  Reason: {e.reason}", False
        return name, f"{prefix}{e}", False
    except EnvError as e:
        return name, f"{prefix}{e}", False

    return name, f"{prefix}{_display_value(value, requirement.is_sensitive)}", True


def run_env_check(
    requirements: Iterable[EnvRequirement],
    raise_on_error: bool = True,
) -> EnvCheckResult:
    """
    Check every requirement and collect the results.

    Args:
        requirements: Variables to check
        raise_on_error: Raise EnvCheckError if any check failed

    Returns:
        EnvCheckResult with one entry per requirement
    """
    result = EnvCheckResult(checks=[check_requirement(r) for r in requirements])

    if not result.is_healthy:
        _logger.error("Environment check failed for %d variable(s)", len(result.failures))
        if raise_on_error:
            raise EnvCheckError(result)
    else:
        _logger.info("Environment check passed (%d variables)", len(result.checks))

    return result
