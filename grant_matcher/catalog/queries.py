"""Attribute filters over a loaded catalog."""

from typing import Iterable, List, Optional

from ..models import GrantProgram


def find_by_industry(programs: Iterable[GrantProgram], industry: str) -> List[GrantProgram]:
    """Programs that list the given industry."""
    return [p for p in programs if industry in p.industry]


def find_by_business_stage(programs: Iterable[GrantProgram], stage: str) -> List[GrantProgram]:
    """Programs that accept the given business stage."""
    return [p for p in programs if stage in p.business_stage]


def find_by_funding_purpose(programs: Iterable[GrantProgram], purpose: str) -> List[GrantProgram]:
    """Programs that fund the given purpose."""
    return [p for p in programs if purpose in p.funding_purpose]


def get_program_by_id(programs: Iterable[GrantProgram], program_id: str) -> Optional[GrantProgram]:
    for program in programs:
        if program.id == program_id:
            return program
    return None
