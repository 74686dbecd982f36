"""Unit of Measure Service - Query functions for the unit of measure reference table.

All functions accept an optional session parameter to support being called from
other service functions that need to maintain transactional atomicity.

Example Usage:
    >>> from recipe_tracker.services.unit_of_measure_service import list_all_uoms
    >>> sorted(uom.description for uom in list_all_uoms())[:3]
    ['Cup', 'Dash', 'Each']
"""

from typing import Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import repositories
from .commands import UnitOfMeasureCommand
from .converters import uom_to_command
from .database import session_scope
from .exceptions import DatabaseError


def list_all_uoms(session: Optional[Session] = None) -> Set[UnitOfMeasureCommand]:
    """Get every unit of measure.

    Args:
        session: Optional database session. If None, creates a new session.

    Returns:
        Set of UnitOfMeasureCommand objects.
    """

    def _impl(sess: Session) -> Set[UnitOfMeasureCommand]:
        return {uom_to_command(uom) for uom in repositories.find_all_uoms(session=sess)}

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError("Failed to retrieve units of measure", e)
