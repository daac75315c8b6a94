"""impossible_states - Make impossible states impossible with sum types"""

__version__ = "0.1.0"

from .dispatch import Dispatcher, match_variant, unreachable
from .exceptions import (
    ErrorType,
    InvalidVariantError,
    MissingHandlerError,
    SumTypeError,
    UnreachableVariantError,
    UnwrapError,
)
from .linked_list import (
    EMPTY,
    LIST_VARIANTS,
    Cons,
    Empty,
    LinkedList,
    cons,
    empty,
    fold_left,
    from_iterable,
    head,
    length,
    map_list,
    reverse,
    sum_list,
    tail,
    to_list,
)
from .models import (
    AirplaneMode,
    BackendFailure,
    Barcode,
    ImageLocator,
    LoggedIn,
    LoggedOut,
    NetworkResult,
    QrCode,
    S3Locator,
    Success,
    UpcCode,
    UrlLocator,
    User,
    UserState,
    classify_response,
    debug_string,
    describe_barcode,
    display_name,
    real_url,
)
from .option import (
    NOTHING,
    OPTION_VARIANTS,
    Nothing,
    Option,
    Some,
    from_nullable,
    get_or_else,
    make_none,
    make_some,
)

__all__ = [
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "OPTION_VARIANTS",
    "make_some",
    "make_none",
    "get_or_else",
    "from_nullable",
    # Linked list
    "LinkedList",
    "Empty",
    "Cons",
    "EMPTY",
    "LIST_VARIANTS",
    "empty",
    "cons",
    "head",
    "tail",
    "length",
    "map_list",
    "fold_left",
    "reverse",
    "to_list",
    "sum_list",
    "from_iterable",
    # Dispatch
    "Dispatcher",
    "match_variant",
    "unreachable",
    # Domain models
    "ImageLocator",
    "UrlLocator",
    "S3Locator",
    "real_url",
    "Barcode",
    "QrCode",
    "UpcCode",
    "describe_barcode",
    "User",
    "UserState",
    "LoggedOut",
    "LoggedIn",
    "display_name",
    "NetworkResult",
    "Success",
    "BackendFailure",
    "AirplaneMode",
    "debug_string",
    "classify_response",
    # Exceptions
    "SumTypeError",
    "ErrorType",
    "UnreachableVariantError",
    "MissingHandlerError",
    "InvalidVariantError",
    "UnwrapError",
]
