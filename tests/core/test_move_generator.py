"""Tests for move generation, the legality filter and perft counts.

Perft reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from rookie.core.attacks import is_in_check
from rookie.core.enums import Color, PieceType
from rookie.core.move import Move
from rookie.core.move_generator import MoveGenerator
from rookie.core.notation import STARTING_FEN, position_from_fen
from rookie.core.position import Position
from rookie.core.types import (
    C1, D2, D6, E1, E2, E4, E5, E7, E8, F1, G1, H1,
    SQUARES, parse_square,
)


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth* by expanding copies of *position*."""
    moves = MoveGenerator(position).generate_legal_moves()
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = position.copy()
        child.apply_unchecked(move)
        nodes += perft(child, depth - 1)
    return nodes


def _targets(moves: list[Move]) -> set[str]:
    return {str(m.to_sq) for m in moves}


class TestLegalMovesBasics:
    def test_start_has_twenty_moves(self, start: Position) -> None:
        assert len(MoveGenerator(start).generate_legal_moves()) == 20

    def test_empty_square_yields_nothing(self, start: Position) -> None:
        assert MoveGenerator(start).legal_moves(E4) == []

    def test_opponent_piece_yields_nothing(self, start: Position) -> None:
        assert MoveGenerator(start).legal_moves(E7) == []

    def test_knight_from_start(self, start: Position) -> None:
        moves = MoveGenerator(start).legal_moves(parse_square("g1"))
        assert _targets(moves) == {"f3", "h3"}

    def test_blocked_bishop(self, start: Position) -> None:
        assert MoveGenerator(start).legal_moves(F1) == []

    def test_does_not_mutate_position(self, start: Position) -> None:
        before = repr(start.board)
        MoveGenerator(start).generate_legal_moves()
        assert repr(start.board) == before
        assert start.side_to_move == Color.WHITE


class TestPawnMoves:
    def test_single_and_double_push(self, start: Position) -> None:
        assert _targets(MoveGenerator(start).legal_moves(E2)) == {"e3", "e4"}

    def test_double_push_blocked_by_intervening_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        assert MoveGenerator(pos).legal_moves(E2) == []

    def test_double_push_needs_empty_destination(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        assert _targets(MoveGenerator(pos).legal_moves(E2)) == {"e3"}

    def test_captures_only_opponents(self) -> None:
        pos = position_from_fen("4k3/8/8/3p1P2/4P3/8/8/4K3 w - - 0 1")
        assert _targets(MoveGenerator(pos).legal_moves(E4)) == {"e5", "d5"}

    def test_black_pawn_moves_down(self) -> None:
        pos = position_from_fen("4k3/3p4/8/8/8/8/8/4K3 b - - 0 1")
        assert _targets(MoveGenerator(pos).legal_moves(parse_square("d7"))) == {
            "d6",
            "d5",
        }

    def test_promotion_expands_to_four_choices(self) -> None:
        pos = position_from_fen("k7/4P3/8/8/8/8/8/4K3 w - - 0 1")
        moves = MoveGenerator(pos).legal_moves(E7)
        assert len(moves) == 4
        assert all(m.to_sq == E8 for m in moves)
        assert {m.promotion for m in moves} == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }

    def test_capture_promotion(self) -> None:
        pos = position_from_fen("k2r4/4P3/8/8/8/8/8/4K3 w - - 0 1")
        moves = MoveGenerator(pos).legal_moves(E7)
        assert len(moves) == 8  # push + capture, four choices each

    def test_en_passant_generated(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert D6 in {m.to_sq for m in MoveGenerator(pos).legal_moves(E5)}

    def test_en_passant_requires_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - - 0 1")
        assert D6 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E5)}

    def test_en_passant_requires_real_pawn_behind_target(self) -> None:
        # Target is stale: a knight, not a pawn, stands on d5.
        pos = position_from_fen("4k3/8/8/3nP3/8/8/8/4K3 w - - 0 1")
        pos.en_passant = D6
        assert D6 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E5)}

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Removing both pawns from rank 5 would open the rook on a5 to the king.
        pos = position_from_fen("4k3/8/8/r2pP2K/8/8/8/8 w - d6 0 1")
        assert D6 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E5)}


class TestLegalityFilter:
    def test_pinned_knight_cannot_move(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4N3/4K3 w - - 0 1")
        assert MoveGenerator(pos).legal_moves(E2) == []

    def test_king_cannot_step_into_attack(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/3rK3 w - - 0 1")
        targets = _targets(MoveGenerator(pos).legal_moves(E1))
        assert "d2" not in targets
        assert "e2" in targets
        assert "d1" in targets  # capture the undefended rook
        assert "f1" not in targets

    def test_must_answer_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/3P4/q3K3 w - - 0 1")
        moves = MoveGenerator(pos).generate_legal_moves()
        assert all(m.from_sq == E1 for m in moves)
        assert _targets(moves) == {"e2", "f2"}
        assert Move(D2, parse_square("d3")) not in moves

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
        ],
    )
    def test_legal_iff_king_safe_after_move(self, fen: str) -> None:
        pos = position_from_fen(fen)
        gen = MoveGenerator(pos)
        for sq in SQUARES:
            legal = gen.legal_moves(sq)
            for candidate in gen.pseudo_legal_moves(sq):
                scratch = pos.copy()
                scratch.apply_unchecked(candidate)
                safe = not is_in_check(scratch.board, pos.side_to_move)
                assert (candidate in legal) == safe, f"{candidate} in {fen}"


class TestCastlingGeneration:
    CASTLE_FEN = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"

    def test_both_sides_available(self) -> None:
        pos = position_from_fen(self.CASTLE_FEN)
        targets = {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}
        assert G1 in targets
        assert C1 in targets

    def test_single_king_move_per_side(self) -> None:
        pos = position_from_fen(self.CASTLE_FEN)
        moves = MoveGenerator(pos).legal_moves(E1)
        assert sum(1 for m in moves if m.to_sq == G1) == 1
        assert not any(m.from_sq == H1 for m in moves)

    def test_not_available_without_right(self) -> None:
        pos = position_from_fen("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w Qkq - 0 1")
        targets = {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}
        assert G1 not in targets
        assert C1 in targets

    def test_blocked_path(self, start: Position) -> None:
        targets = {m.to_sq for m in MoveGenerator(start).legal_moves(E1)}
        assert targets == set()

    def test_queenside_needs_b_file_empty(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/RN2K3 w Q - 0 1")
        assert C1 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}

    def test_not_while_in_check(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/8/R3K2R w KQ - 0 1")
        targets = {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}
        assert G1 not in targets
        assert C1 not in targets

    def test_not_through_attacked_square(self) -> None:
        # Black rook on f8 covers f1.
        pos = position_from_fen("4kr2/8/8/8/8/8/8/4K2R w K - 0 1")
        assert G1 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}

    def test_not_onto_attacked_square(self) -> None:
        pos = position_from_fen("4k1r1/8/8/8/8/8/8/4K2R w K - 0 1")
        assert G1 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}

    def test_queenside_allowed_when_only_b_file_attacked(self) -> None:
        pos = position_from_fen("1r2k3/8/8/8/8/8/8/R3K3 w Q - 0 1")
        assert C1 in {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}

    def test_requires_rook_on_corner(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w K - 0 1")
        assert G1 not in {m.to_sq for m in MoveGenerator(pos).legal_moves(E1)}


class TestKingSafety:
    @pytest.mark.parametrize(
        "fen",
        [
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
        ],
    )
    def test_king_never_lands_on_attacked_square(self, fen: str) -> None:
        pos = position_from_fen(fen)
        king_sq = pos.board.king_square(pos.side_to_move)
        gen = MoveGenerator(pos)
        for move in gen.legal_moves(king_sq):
            scratch = pos.copy()
            scratch.apply_unchecked(move)
            assert not is_in_check(scratch.board, pos.side_to_move)


# ── Perft ────────────────────────────────────────────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"
POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerft:
    @pytest.mark.parametrize(
        "fen, depth, expected",
        [
            (STARTING_FEN, 1, 20),
            (STARTING_FEN, 2, 400),
            (STARTING_FEN, 3, 8_902),
            (KIWIPETE, 1, 48),
            (KIWIPETE, 2, 2_039),
            (POS3, 1, 14),
            (POS3, 2, 191),
            (POS3, 3, 2_812),
            (POS4, 1, 6),
            (POS4, 2, 264),
            (POS5, 1, 44),
            (POS5, 2, 1_486),
        ],
    )
    def test_node_counts(self, fen: str, depth: int, expected: int) -> None:
        assert perft(position_from_fen(fen), depth) == expected

    @pytest.mark.slow
    @pytest.mark.parametrize(
        "fen, depth, expected",
        [
            (KIWIPETE, 3, 97_862),
            (POS4, 3, 9_467),
            (POS5, 3, 62_379),
        ],
    )
    def test_deep_node_counts(self, fen: str, depth: int, expected: int) -> None:
        assert perft(position_from_fen(fen), depth) == expected
