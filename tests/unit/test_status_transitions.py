"""Unit tests for StatusTransitionMatrix."""

import itertools

import pytest

from src.models.order_status import OrderStatus
from src.services.status_transitions import StatusTransitionMatrix

S = OrderStatus

LEGAL_EDGES = {
    (S.PENDING, S.CONFIRMED),
    (S.PENDING, S.CANCELLED),
    (S.CONFIRMED, S.SHIPPED),
    (S.CONFIRMED, S.CANCELLED),
    (S.SHIPPED, S.DELIVERED),
    (S.SHIPPED, S.RETURNED),
    (S.DELIVERED, S.CLOSED),
    (S.DELIVERED, S.RETURNED),
    (S.RETURNED, S.CLOSED),
}


@pytest.fixture
def matrix() -> StatusTransitionMatrix:
    return StatusTransitionMatrix()


class TestCanTransition:
    """Tests for can_transition."""

    @pytest.mark.parametrize("edge", sorted(LEGAL_EDGES))
    def test_legal_edges_are_allowed(self, matrix: StatusTransitionMatrix, edge: tuple) -> None:
        """Test that every edge in the table is allowed."""
        assert matrix.can_transition(*edge) is True

    def test_every_other_pair_is_rejected(self, matrix: StatusTransitionMatrix) -> None:
        """Test that pairs outside the table, including self-loops, are rejected."""
        for pair in itertools.product(OrderStatus, repeat=2):
            if pair not in LEGAL_EDGES:
                assert matrix.can_transition(*pair) is False, pair

    @pytest.mark.parametrize("terminal", [S.CANCELLED, S.CLOSED])
    def test_terminal_states_go_nowhere(self, matrix: StatusTransitionMatrix, terminal: OrderStatus) -> None:
        """Test that terminal states have no outgoing edges."""
        assert not any(matrix.can_transition(terminal, target) for target in OrderStatus)

    def test_no_multi_hop_shortcut(self, matrix: StatusTransitionMatrix) -> None:
        """Test that reaching Delivered from Pending requires single steps."""
        assert matrix.can_transition(S.PENDING, S.SHIPPED) is False
        assert matrix.can_transition(S.PENDING, S.DELIVERED) is False

    def test_unknown_from_status_is_rejected(self) -> None:
        """Test that a status missing from the table yields False."""
        matrix = StatusTransitionMatrix({S.PENDING: frozenset({S.CONFIRMED})})
        assert matrix.can_transition(S.SHIPPED, S.DELIVERED) is False
        assert matrix.can_transition(S.PENDING, S.CONFIRMED) is True
