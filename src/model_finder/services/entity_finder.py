"""Case-insensitive single-row search over configured columns."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session

from model_finder.entities import ValueObject
from model_finder.exceptions import ModelNotFoundError, MultipleRecordsFoundError

logger = logging.getLogger(__name__)


class EntityFinder:
    """Runs ``col1 ILIKE :value OR col2 ILIKE :value ...`` and requires one row.

    The value is used as the pattern as-is, so ``%`` and ``_`` in it keep
    their LIKE meaning.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        """Initialize the finder.

        Args:
            session_factory: Returns a new Session, e.g. a ``sessionmaker``
        """
        self._session_factory = session_factory

    @staticmethod
    def build_statement(model: type, columns: Sequence[str], value: str) -> Select:
        conditions = [getattr(model, column).ilike(value) for column in columns]
        return select(model).where(or_(*conditions))

    def find_single(self, model: type, columns: Sequence[str], value: ValueObject | str) -> Any:
        """Return the only row matching ``value`` in any of ``columns``.

        Args:
            model: SQLAlchemy mapped class
            columns: Mapped attribute names to search
            value: The normalized search value

        Returns:
            The matching instance, detached from its session

        Raises:
            ModelNotFoundError: If no row matches
            MultipleRecordsFoundError: If more than one row matches
        """
        value = str(value)
        statement = self.build_statement(model, columns, value)

        with self._session_factory() as session:
            try:
                result = session.scalars(statement).one()
            except NoResultFound as e:
                raise ModelNotFoundError(model.__name__, value, list(columns)) from e
            except MultipleResultsFound as e:
                raise MultipleRecordsFoundError(model.__name__, value, list(columns)) from e

        logger.debug("Found %s matching %r", model.__name__, value)
        return result
