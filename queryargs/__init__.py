from .config import ServiceConfig
from .encode import (
    QueryArg,
    QueryArgList,
    add_dict,
    add_list,
    add_one,
    add_record,
    boolean,
    canonical_query_string,
    list_item_key,
    optional_member,
    pipe,
    query_string,
    unchanged_query_args,
    uri,
)
from .errors import (
    ConfigError,
    MissingParameterError,
    QueryArgsError,
    UnsupportedMethodError,
)
from .request import QueryRequest
