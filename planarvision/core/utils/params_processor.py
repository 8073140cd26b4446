"""
Parameter processing utilities.

Handles preparation of operation parameters, accepting either
validated Pydantic models, plain dictionaries or None.
"""

from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def prepare_params(params: Optional[Union[T, Dict[str, Any]]], params_class: Type[T]) -> T:
    """
    Prepare operation parameters with default initialization.

    If params is None, creates a new instance with defaults.
    If params is a dict, validates it into params_class.
    If params is already an instance, returns it unchanged.

    Args:
        params: Parameters instance, dict or None
        params_class: Pydantic parameter class

    Returns:
        Initialized parameters instance

    Raises:
        pydantic.ValidationError: If a dict fails validation
    """
    if params is None:
        return params_class()
    if isinstance(params, dict):
        return params_class.model_validate(params)
    return params


def params_to_dict(params: BaseModel) -> Dict[str, Any]:
    """
    JSON-compatible dictionary of the parameters that are set.

    Enum members are reduced to their values, so the result is ready for
    log messages.
    """
    return params.model_dump(mode="json", exclude_none=True)
