"""src/splatfmt/features/interpolation/adapters/stdlib_filter.py
What: ``logging.Filter`` applying splat interpolation to standard library records.
Why: Let ``logging`` call sites use the same token set and leftover-argument rules.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Final

from typing_extensions import override

from splatfmt.config.options import SplatOptions
from splatfmt.shared.record import MESSAGE_FIELD, SPLAT_FIELD

from ..usecases.splatter import Splatter

# ``"%(name)s"`` templates belong to the standard library's mapping formatting.
_NAMED_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"%\([^)]*\)")

# Set on records this filter has already rewritten.
_PROCESSED_MARKER: Final[str] = "_splatfmt_done"


class SplatFilter(logging.Filter):
    """Rewrite ``record.msg`` with splat semantics and park leftovers on ``record.splat``.

    ``record.args`` is cleared afterwards so ``LogRecord.getMessage`` does not
    apply ``%``-formatting a second time. Records rewritten by an earlier
    filter are marked and pass through; a caller-supplied ``splat`` extra is
    replaced by the leftovers.
    """

    def __init__(
        self,
        name: str = "",
        options: SplatOptions | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(name)
        self.splatter = Splatter(options)

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record) or hasattr(record, _PROCESSED_MARKER):
            return True
        if not isinstance(record.msg, str):
            return True

        args = record.args
        if isinstance(args, Mapping):
            if _NAMED_PLACEHOLDER.search(record.msg):
                return True
            # LogRecord unwraps a lone mapping argument; restore it as one value.
            args = (args,)

        view: dict[str, Any] = {
            MESSAGE_FIELD: record.msg,
            SPLAT_FIELD: list(args or ()),
        }
        _ = self.splatter.transform(view)

        record.msg = view[MESSAGE_FIELD]
        record.args = ()
        setattr(record, SPLAT_FIELD, view[SPLAT_FIELD])
        setattr(record, _PROCESSED_MARKER, True)
        return True


__all__ = ["SplatFilter"]
