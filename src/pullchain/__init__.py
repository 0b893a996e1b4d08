import logging

from ._concat import Concat, concat, flatten
from ._core import Config, get_config
from ._eager import Seq, Vec
from ._errors import ExhaustedError, InvalidArgumentError
from ._iter import Iter
from ._merge import Merge, Selection, Selector, ascending, descending, merge
from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._reducers import (
    first,
    first_non_null,
    fold_until,
    fold_until_indexed,
    for_each,
    for_each_flat,
    for_each_flat3,
    for_each_indexed,
    for_each_non_null,
    for_each_non_null3,
    last,
    last_non_null,
    unzip,
    unzip3,
    unzipp,
)
from ._repeat import (
    repeat,
    repeat_all,
    repeat_all_to_size,
    repeat_each,
    repeat_each_to_size,
)
from ._source import PullSource, as_source, empty, generate, generate_seeded
from ._split import skip_null, split
from ._types import Destination, Unzipped, Unzipped3
from ._zip import zip_longest_with, zip_longest_with3, zip_with, zip_with3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Concat",
    "Config",
    "Destination",
    "ExhaustedError",
    "InvalidArgumentError",
    "Iter",
    "Merge",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "PullSource",
    "Selection",
    "Selector",
    "Seq",
    "Some",
    "Unzipped",
    "Unzipped3",
    "Vec",
    "as_source",
    "ascending",
    "concat",
    "descending",
    "empty",
    "first",
    "first_non_null",
    "flatten",
    "fold_until",
    "fold_until_indexed",
    "for_each",
    "for_each_flat",
    "for_each_flat3",
    "for_each_indexed",
    "for_each_non_null",
    "for_each_non_null3",
    "generate",
    "generate_seeded",
    "get_config",
    "last",
    "last_non_null",
    "merge",
    "repeat",
    "repeat_all",
    "repeat_all_to_size",
    "repeat_each",
    "repeat_each_to_size",
    "skip_null",
    "split",
    "unzip",
    "unzip3",
    "unzipp",
    "zip_longest_with",
    "zip_longest_with3",
    "zip_with",
    "zip_with3",
]
