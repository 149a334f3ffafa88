"""Tests for the sorted claimed-range set."""

from mirador.highlighting.claims import ClaimedRanges, FormattedRun, SyntaxRole

P = SyntaxRole.PLAIN
S = SyntaxRole.STRING
C = SyntaxRole.COMMENT


class TestClaim:
    def test_claim_and_overlap(self) -> None:
        claims = ClaimedRanges()
        assert claims.claim(2, 5, S)
        assert claims.overlaps(4, 8)
        assert claims.overlaps(0, 3)
        assert claims.overlaps(3, 4)
        assert not claims.overlaps(5, 9)
        assert not claims.overlaps(0, 2)

    def test_overlapping_claim_rejected(self) -> None:
        claims = ClaimedRanges()
        claims.claim(2, 5, S)
        assert not claims.claim(4, 6, C)
        assert not claims.claim(0, 10, C)
        assert len(claims) == 1

    def test_adjacent_claims_allowed(self) -> None:
        claims = ClaimedRanges()
        assert claims.claim(0, 2, S)
        assert claims.claim(2, 4, C)
        assert len(claims) == 2

    def test_empty_range_rejected(self) -> None:
        claims = ClaimedRanges()
        assert not claims.claim(3, 3, S)
        assert not claims.claim(4, 2, S)
        assert len(claims) == 0

    def test_out_of_order_claims_between_existing(self) -> None:
        claims = ClaimedRanges()
        claims.claim(10, 12, S)
        claims.claim(0, 2, S)
        assert claims.claim(5, 7, C)
        assert not claims.claim(1, 11, C)


class TestPartition:
    def test_gaps_filled_with_plain(self) -> None:
        claims = ClaimedRanges()
        claims.claim(6, 8, C)
        claims.claim(2, 4, S)
        assert claims.partition(10) == (
            FormattedRun(0, 2, P),
            FormattedRun(2, 4, S),
            FormattedRun(4, 6, P),
            FormattedRun(6, 8, C),
            FormattedRun(8, 10, P),
        )

    def test_no_claims(self) -> None:
        assert ClaimedRanges().partition(3) == (FormattedRun(0, 3, P),)

    def test_full_cover(self) -> None:
        claims = ClaimedRanges()
        claims.claim(0, 3, S, emphasized=True)
        assert claims.partition(3) == (FormattedRun(0, 3, S, True),)

    def test_run_length(self) -> None:
        assert FormattedRun(2, 7, S).length == 5
