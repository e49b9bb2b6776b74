#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Contract compiler for EasyRest.

Turns a contract class into an ``AdapterFactory``. All binding metadata is
resolved here, once per contract type: every generated method closes over an
immutable ``MethodPlan`` and only does argument lookup, ``RequestInfo``
construction and backend dispatch at call time.
"""

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .cancellation import CancellationToken
from .config import EasyRestConfig, get_config
from .data.serialization import (
    QueryCollectionParameterInfo,
    QueryParameterInfo,
    QueryValueParameterInfo,
)
from .models import (
    ContractDescription,
    HttpMethod,
    MethodDescription,
    ParameterRole,
    QuerySerializationMethod,
    ResultShape,
)
from .reader import describe_contract
from .request import RequestInfo
from .requester import Requester
from .utils.exceptions import ArgumentError, ContractCompilationError
from .utils.logger import ModernLogger

Dispatcher = Callable[[Requester, RequestInfo], Any]

_GENERATED_MODULE = "easyrest.generated"
_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class QueryBinding:
    """
    Compiled binding of one argument position to a query parameter.
    """

    index: int
    name: str
    format: Optional[str]
    serialization_method: QuerySerializationMethod
    is_collection: bool

    def bind(self, value: Any) -> QueryParameterInfo:
        if self.is_collection:
            return QueryCollectionParameterInfo(
                self.serialization_method, self.name, value, self.format
            )
        return QueryValueParameterInfo(
            self.serialization_method, self.name, value, self.format
        )


def _void_dispatcher() -> Dispatcher:
    def dispatch(requester: Requester, request_info: RequestInfo) -> Any:
        return requester.request_void(request_info)

    return dispatch


def _typed_dispatcher(result_type: Any) -> Dispatcher:
    def dispatch(requester: Requester, request_info: RequestInfo) -> Any:
        return requester.request(request_info, result_type)

    return dispatch


@dataclass(frozen=True)
class MethodPlan:
    """
    Everything needed to execute one contract method, fixed at compile time.
    """

    name: str
    http_method: HttpMethod
    path: str
    cancellation_index: Optional[int]
    query_bindings: Tuple[QueryBinding, ...]
    result_shape: ResultShape
    result_type: Any
    dispatcher: Dispatcher

    def build_request(self, values: Sequence[Any]) -> RequestInfo:
        token: Optional[CancellationToken] = None
        if self.cancellation_index is not None:
            token = values[self.cancellation_index]
        request_info = RequestInfo(self.http_method, self.path, token)
        for binding in self.query_bindings:
            request_info.add_parameter(binding.bind(values[binding.index]))
        return request_info

    def execute(self, requester: Requester, values: Sequence[Any]) -> Any:
        return self.dispatcher(requester, self.build_request(values))


@dataclass(frozen=True)
class AdapterFactory:
    """
    Creates adapters for one compiled contract.
    """

    contract_type: type
    implementation_type: type
    plans: Tuple[MethodPlan, ...]

    def __call__(self, requester: Requester) -> Any:
        if requester is None:
            raise ArgumentError("A requester is required", parameter_name="requester")
        return self.implementation_type(requester)


def _build_method(plan: MethodPlan, function: Any) -> Callable[..., Any]:
    signature = inspect.signature(function)
    parameters = list(signature.parameters.values())[1:]
    names = tuple(parameter.name for parameter in parameters)
    arity = len(names)
    positional_only_shape = all(p.kind in _POSITIONAL_KINDS for p in parameters)

    def invoke(self: Any, *args: Any, **kwargs: Any) -> Any:
        if positional_only_shape and not kwargs and len(args) == arity:
            values: Sequence[Any] = args
        else:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            values = tuple(bound.arguments[name] for name in names)
        return plan.execute(self._requester, values)

    # ``updated=()`` keeps ``__isabstractmethod__`` off the generated method.
    functools.update_wrapper(invoke, function, updated=())
    return invoke


def _build_init() -> Callable[..., None]:
    def __init__(self: Any, requester: Requester) -> None:
        self._requester = requester

    return __init__


class ContractCompiler(ModernLogger):
    """
    Compile contract classes into adapter factories.
    """

    def __init__(self, config: Optional[EasyRestConfig] = None) -> None:
        self.config = config or get_config()
        super().__init__(name="ContractCompiler", level=self.config.log_level)

    def compile(self, contract_type: type) -> AdapterFactory:
        """
        Read and compile ``contract_type``.

        Raises ``ContractCompilationError`` for any invalid method; nothing
        is produced in that case.
        """
        description = describe_contract(contract_type)
        return self.compile_description(description)

    def compile_description(self, description: ContractDescription) -> AdapterFactory:
        self.debug(
            "Compiling contract %s (%d methods)",
            description.name,
            len(description.methods),
        )
        plans: List[MethodPlan] = []
        namespace: Dict[str, Any] = {
            "__module__": _GENERATED_MODULE,
            "__doc__": "Generated adapter for {0}".format(description.name),
            "__init__": _build_init(),
            "__easyrest_contract__": description.contract_type,
        }

        type_name = "{0}{1}Implementation".format(
            self.config.generated_type_prefix, description.contract_type.__name__
        )
        for method in description.methods:
            plan = self.build_plan(description, method)
            plans.append(plan)
            generated = _build_method(plan, method.function)
            generated.__qualname__ = "{0}.{1}".format(type_name, method.name)
            namespace[method.name] = generated

        implementation_type = self._create_type(description, type_name, namespace)
        self._ensure_concrete(description, implementation_type)

        self.info(
            "Compiled contract %s into %s",
            description.name,
            implementation_type.__qualname__,
        )
        return AdapterFactory(
            contract_type=description.contract_type,
            implementation_type=implementation_type,
            plans=tuple(plans),
        )

    def build_plan(
        self, description: ContractDescription, method: MethodDescription
    ) -> MethodPlan:
        """
        Validate one method and resolve its dispatch plan.
        """
        contract_name = description.contract_type.__qualname__

        def fail(message: str) -> ContractCompilationError:
            return ContractCompilationError(
                message, contract_name=contract_name, method_name=method.name
            )

        if method.request is None:
            raise fail(
                "Method {0} does not have a suitable request decorator on it".format(
                    method.name
                )
            )

        cancellation = [
            parameter
            for parameter in method.parameters
            if parameter.role is ParameterRole.CANCELLATION
        ]
        if len(cancellation) > 1:
            raise fail(
                "Found more than one parameter of type CancellationToken for method {0}".format(
                    method.name
                )
            )

        bindings: List[QueryBinding] = []
        for parameter in method.parameters:
            if parameter.role is ParameterRole.QUERY:
                bindings.append(
                    QueryBinding(
                        index=parameter.index,
                        name=parameter.query_name or parameter.name,
                        format=parameter.format,
                        serialization_method=parameter.serialization_method,
                        is_collection=parameter.is_collection,
                    )
                )
            elif parameter.role is ParameterRole.IGNORED:
                if self.config.strict_parameter_roles:
                    raise fail(
                        "Parameter {0} of method {1} has no recognized binding".format(
                            parameter.name, method.name
                        )
                    )
                self.debug(
                    "Ignoring unbound parameter %s of %s.%s",
                    parameter.name,
                    contract_name,
                    method.name,
                )

        if method.result_shape is ResultShape.VOID:
            dispatcher = _void_dispatcher()
        elif method.result_shape is ResultShape.VALUE:
            dispatcher = _typed_dispatcher(method.result_type)
        else:
            raise fail(
                "Method {0} has a return type that is not an awaitable of T or None "
                "(declared: {1!r})".format(method.name, method.declared_result)
            )

        return MethodPlan(
            name=method.name,
            http_method=method.request.method,
            path=method.request.path,
            cancellation_index=cancellation[0].index if cancellation else None,
            query_bindings=tuple(bindings),
            result_shape=method.result_shape,
            result_type=method.result_type,
            dispatcher=dispatcher,
        )

    def _create_type(
        self, description: ContractDescription, type_name: str, namespace: Dict[str, Any]
    ) -> type:
        contract_type = description.contract_type
        try:
            return type(contract_type)(type_name, (contract_type,), namespace)
        except TypeError as exc:
            raise ContractCompilationError(
                "Unable to create implementation for contract {0}. "
                "Ensure that the contract is a subclassable class".format(description.name),
                contract_name=contract_type.__qualname__,
                cause=exc,
            ) from exc

    @staticmethod
    def _ensure_concrete(description: ContractDescription, implementation_type: type) -> None:
        abstract = sorted(getattr(implementation_type, "__abstractmethods__", ()))
        if abstract:
            raise ContractCompilationError(
                "Contract {0} declares abstract members that are not request methods: {1}".format(
                    description.name, ", ".join(abstract)
                ),
                contract_name=description.contract_type.__qualname__,
                method_name=abstract[0],
            )
