"""A class to package AWS query-protocol arguments for a transport."""

import logging
from typing import Optional

import requests

from .config import METHODS, ServiceConfig
from .encode import (
    QueryArgList,
    QueryArgsFn,
    canonical_query_string,
    query_string,
)
from .errors import MissingParameterError, UnsupportedMethodError
from .version import __version__

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class QueryRequest:
    """Accumulates the query arguments of a single API call.

    ``Action`` and ``Version`` are always sent. Everything else is added
    with :py:meth:`add`, which takes the functions returned by the
    :py:mod:`queryargs.encode` helpers.

    .. note::
       Nothing is sent. :py:meth:`prepare` hands back a
       :py:class:`requests.PreparedRequest` for the caller to sign and
       send.

    """

    def __init__(
        self,
        endpoint: str,
        action: str,
        version: str,
        method: str = "POST",
        logger: Optional[logging.Logger] = None,
    ):
        """Create a request for one API action.

        :param endpoint: service URL, e.g. ``https://sqs.amazonaws.com/``
        :param action: value of the ``Action`` argument
        :param version: value of the ``Version`` argument
        :param method: ``GET`` (arguments in the URL) or ``POST`` (form body)
        :param logger: (optional) logger to use instead of the default
        :raises: `MissingParameterError`: if action or version is empty
        :raises: `UnsupportedMethodError`: if method is not GET or POST

        """
        if not action:
            raise MissingParameterError("action")
        if not version:
            raise MissingParameterError("version")
        self.endpoint = endpoint
        self.action = action
        self.version = version
        self.method = method.upper()
        if self.method not in METHODS:
            raise UnsupportedMethodError(method)
        self.user_agent = "queryargs/" + __version__
        self._args: QueryArgList = []
        if logger is not None:
            self.logger = logger
        else:
            self.logger = logging.getLogger("QueryRequest")
            if self.logger.level == logging.NOTSET:
                self.logger.setLevel(logging.INFO)

    @classmethod
    def from_config(
        cls,
        config: ServiceConfig,
        action: str,
    ) -> "QueryRequest":
        return QueryRequest(
            config.endpoint,
            action,
            config.api_version,
            method=config.method,
            logger=config.logger("QueryRequest"),
        )

    def add(self, *steps: QueryArgsFn) -> "QueryRequest":
        """Apply steps to the accumulated arguments.

        :returns: this instance for chaining

        """
        for step in steps:
            self._args = step(self._args)
        return self

    def args(self) -> QueryArgList:
        return [("Action", self.action), ("Version", self.version)] + list(
            self._args
        )

    def query_string(self) -> str:
        return query_string(self.args())

    def canonical_query_string(self) -> str:
        return canonical_query_string(self.args())

    def prepare(self) -> requests.PreparedRequest:
        args = self.args()
        self.logger.debug(
            "Query (%s): %s with %d args",
            self.method,
            self.action,
            len(args),
        )
        headers = {"User-Agent": self.user_agent}
        if self.method == "GET":
            sep = "&" if "?" in self.endpoint else "?"
            req = requests.Request(
                "GET",
                self.endpoint + sep + query_string(args),
                headers=headers,
            )
        else:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            req = requests.Request(
                self.method,
                self.endpoint,
                data=query_string(args),
                headers=headers,
            )
        return req.prepare()
