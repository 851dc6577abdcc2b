"""pandas views of sealed enum members"""

from typing import Sequence

import numpy as _np
import pandas as _pd
from typing_extensions import Literal as _Literal

from .value_kind import ValueKind

FRAME_COLUMNS = ["ordinal", "prop_name", "description", "kind"]


def categorical_dtype(values: Sequence[ValueKind]) -> _pd.CategoricalDtype:
    """Build an ordered categorical dtype from sealed enum members, for use on DataFrame columns holding prop names

    :param Sequence[ValueKind] values: sealed members, in ordinal order
    :return _pd.CategoricalDtype: dtype with prop names as categories, ordered by ordinal
    """
    return _pd.CategoricalDtype(categories=[value.prop_name for value in values], ordered=True)


def values_to_frame(
    values: Sequence[ValueKind], index: _Literal["ordinal", "prop_name"] = "ordinal"
) -> _pd.DataFrame:
    """Tabulate sealed enum members

    :param Sequence[ValueKind] values: sealed members, in ordinal order
    :param str index: column to index the resulting DataFrame by, either 'ordinal' (default) or 'prop_name'
    :raises ValueError: if index is not one of the supported columns
    :return _pd.DataFrame: one row per member, with columns ordinal, prop_name, description and kind (less the one
     used as index)
    """
    if index not in ("ordinal", "prop_name"):
        raise ValueError(f"Unsupported index '{index}'. Use 'ordinal' or 'prop_name'", index)
    frame = _pd.DataFrame(
        {
            "ordinal": _np.asarray([value.ordinal for value in values], dtype=_np.int64),
            "prop_name": [value.prop_name for value in values],
            "description": [value.description for value in values],
            "kind": [type(value).__name__ for value in values],
        },
        columns=FRAME_COLUMNS,
    )
    return frame.set_index(index)
