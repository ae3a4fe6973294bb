"""
Process-level collection of Terms.
"""

import logging
from typing import Dict, Optional

from blessed import Terminal

from .errors import BadId, IdAlreadyTaken
from .nodes import BYTE_MAX, is_address
from .term import Term

logger = logging.getLogger(__name__)


class ComponentTree:
    """Owns every Term of the program, keyed by Term id.

    Creating Terms through :meth:`term` validates their ids; a Term pushed with
    :meth:`push_term` is checked the same way.
    """

    def __init__(self, terminal: Optional[Terminal] = None):
        self.terminal = terminal
        self.terms: Dict[int, Term] = {}

    def __len__(self):
        return len(self.terms)

    def term(self, id: int, width: Optional[int] = None,
             height: Optional[int] = None) -> Term:
        """Create a Term and add it to the tree.

        Missing dimensions are read from the tree's terminal.

        Raises:
            BadId: ``id`` is not a byte
            IdAlreadyTaken: A Term with ``id`` exists
        """
        if id in self.terms:
            raise IdAlreadyTaken(f"term {id} already exists")
        term = Term(id, width, height, terminal=self.terminal)
        self.terms[id] = term
        logger.debug("Created %r", term)
        return term

    def push_term(self, term: Term):
        """Add an existing Term; on failure the error carries it as ``node``."""
        if not is_address((term.id,), 1):
            raise BadId(f"bad term id {term.id!r}", node=term)
        if term.id in self.terms:
            raise IdAlreadyTaken(f"term {term.id} already exists", node=term)
        self.terms[term.id] = term

    def term_ref(self, id: int) -> Optional[Term]:
        return self.terms.get(id)

    def has_term(self, id: int) -> bool:
        return id in self.terms

    def assign_term_id(self) -> int:
        """Return the lowest Term id not in use."""
        for tid in range(BYTE_MAX + 1):
            if tid not in self.terms:
                return tid
        raise BadId("no free term id")
