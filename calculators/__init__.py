"""Stateless SIP, step-up SIP, SWP and HRA calculation engine."""

import logging

from calculators.core.hra import compute_hra, hra_report
from calculators.core.sip import project_sip
from calculators.core.step_up_sip import project_step_up_sip
from calculators.core.swp import project_swp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compute_hra",
    "hra_report",
    "project_sip",
    "project_step_up_sip",
    "project_swp",
]
