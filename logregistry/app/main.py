from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, Tuple

from logregistry.core.errors import UserFacingError
from logregistry.logging.config import configure_logging
from logregistry.services import log_registry
from logregistry.services.log_registry import LogRegistry

DEMO_SCRIPT: Tuple[Tuple[str, str], ...] = (
    ("info", "Application started"),
    ("warn", "Low memory"),
    ("err", "File not found"),
)

logger = logging.getLogger(__name__)


def run_demo(registry: LogRegistry, script: Sequence[Tuple[str, str]] = DEMO_SCRIPT) -> None:
    for category, message in script:
        registry.append(category, message)
    registry.dump_all()


def _report(exc: UserFacingError) -> None:
    print(f"error: {exc.title}: {exc}", file=sys.stderr)
    if exc.remediation:
        print(f"hint: {exc.remediation}", file=sys.stderr)


def main(script: Optional[Sequence[Tuple[str, str]]] = None) -> int:
    configure_logging(level=logging.WARNING)

    first = log_registry.instance()
    second = log_registry.instance()
    if first is second:
        logger.info(
            "Registry is a singleton: both handles share id=%#x",
            id(first),
            extra={"registry_id": f"{id(first):#x}"},
        )
    else:  # pragma: no cover - would mean the binding is broken
        logger.error("More than one registry instance is live")
        log_registry.destroy()
        return 1

    try:
        run_demo(first, DEMO_SCRIPT if script is None else script)
    except UserFacingError as exc:
        logger.debug("Demo aborted", exc_info=True)
        _report(exc)
        return 1
    finally:
        log_registry.destroy()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
