"""Calculator registry used by the presentation layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from calculators.core.hra import hra_report
from calculators.core.sip import project_sip
from calculators.core.step_up_sip import project_step_up_sip
from calculators.core.swp import project_swp
from calculators.domain.errors import InvalidInputError, UnknownCalculatorError
from calculators.domain.inputs import (
    hra_request_from_form,
    sip_request_from_form,
    step_up_sip_request_from_form,
    swp_request_from_form,
)
from calculators.schemas.hra import HRARequest
from calculators.schemas.sip import SIPRequest
from calculators.schemas.step_up_sip import StepUpSIPRequest
from calculators.schemas.swp import SWPRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculator:
    request_model: Type[BaseModel]
    compute: Callable[[Any], BaseModel]
    from_form: Callable[[Mapping[str, Any]], Optional[BaseModel]]


CALCULATORS: Dict[str, Calculator] = {
    "sip": Calculator(SIPRequest, project_sip, sip_request_from_form),
    "step_up_sip": Calculator(StepUpSIPRequest, project_step_up_sip, step_up_sip_request_from_form),
    "swp": Calculator(SWPRequest, project_swp, swp_request_from_form),
    "hra": Calculator(HRARequest, hra_report, hra_request_from_form),
}


def _lookup(name: str) -> Calculator:
    try:
        return CALCULATORS[name]
    except KeyError:
        raise UnknownCalculatorError(name) from None


def _format_errors(exc: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in error['loc']) or 'payload'}: {error['msg']}"
        for error in exc.errors()
    ]


def _compute(name: str, calculator: Calculator, request: BaseModel) -> Dict[str, Any]:
    """Run the calculation; results that overflow to non-finite numbers are rejected as invalid input."""
    try:
        return calculator.compute(request).model_dump()
    except (OverflowError, ValidationError) as exc:
        if isinstance(exc, ValidationError):
            errors = [f"result out of range: {message}" for message in _format_errors(exc)]
        else:
            errors = [f"calculation overflowed: {exc}"]
        logger.warning("rejected %s request: %s", name, "; ".join(errors))
        raise InvalidInputError(errors, details=request.model_dump()) from exc


def run_calculator(name: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate ``payload`` against the calculator's request model and return the dumped result."""
    calculator = _lookup(name)
    try:
        request = calculator.request_model.model_validate(payload)
    except ValidationError as exc:
        errors = _format_errors(exc)
        logger.warning("rejected %s payload: %s", name, "; ".join(errors))
        raise InvalidInputError(errors, details=exc.errors()) from exc

    return _compute(name, calculator, request)


def run_calculator_form(name: str, form: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Like run_calculator, but from raw form text. None means there is nothing to show yet."""
    calculator = _lookup(name)
    request = calculator.from_form(form)
    if request is None:
        logger.debug("%s form incomplete, no result", name)
        return None
    return _compute(name, calculator, request)
