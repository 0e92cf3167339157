"""Tests for quote list utilities."""

from datetime import datetime, timedelta, UTC

from quickquote.domain.entities import DiscountType, QuoteStatus
from quickquote.domain.quote_management import (
    create_duplicate_quote_data,
    filter_quotes_by_status,
    get_expired_quotes,
    is_quote_expired,
    search_quotes,
    sort_quotes_by_date,
)

BASE = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)


class TestSortQuotesByDate:
    """Tests for sort_quotes_by_date."""

    def test_newest_first(self, make_quote):
        """Test quotes are ordered by creation time descending."""
        old = make_quote(id="a", created_at=BASE)
        mid = make_quote(id="b", created_at=BASE + timedelta(days=1))
        new = make_quote(id="c", created_at=BASE + timedelta(days=2))

        assert sort_quotes_by_date([mid, old, new]) == [new, mid, old]

    def test_ties_broken_by_id(self, make_quote):
        """Test equal timestamps sort by ascending id regardless of input order."""
        q1 = make_quote(id="q-2", created_at=BASE)
        q2 = make_quote(id="q-1", created_at=BASE)
        q3 = make_quote(id="q-3", created_at=BASE)

        assert [q.id for q in sort_quotes_by_date([q1, q2, q3])] == ["q-1", "q-2", "q-3"]
        assert [q.id for q in sort_quotes_by_date([q3, q1, q2])] == ["q-1", "q-2", "q-3"]

    def test_does_not_modify_input(self, make_quote):
        """Test the input list is left untouched."""
        quotes = [make_quote(id="a", created_at=BASE), make_quote(id="b", created_at=BASE + timedelta(hours=1))]
        original = list(quotes)

        result = sort_quotes_by_date(quotes)

        assert quotes == original
        assert result is not quotes

    def test_empty(self):
        """Test sorting nothing."""
        assert sort_quotes_by_date([]) == []


def test_filter_quotes_by_status(make_quote):
    """Test filtering keeps exact status matches in input order."""
    quotes = [
        make_quote(id="1", status=QuoteStatus.PENDING),
        make_quote(id="2", status=QuoteStatus.ACCEPTED),
        make_quote(id="3", status=QuoteStatus.PENDING),
    ]

    assert [q.id for q in filter_quotes_by_status(quotes, QuoteStatus.PENDING)] == ["1", "3"]
    assert filter_quotes_by_status(quotes, QuoteStatus.EXPIRED) == []


class TestSearchQuotes:
    """Tests for search_quotes."""

    def test_matches_quote_number(self, make_quote):
        """Test case-insensitive substring match on the quote number."""
        quotes = [
            make_quote(id="1", quote_number="QQ-2025-001"),
            make_quote(id="2", quote_number="QQ-2025-012"),
        ]
        assert [q.id for q in search_quotes(quotes, "qq-2025-01")] == ["2"]

    def test_matches_customer_name(self, make_quote):
        """Test case-insensitive substring match on the customer name."""
        quotes = [
            make_quote(id="1", customer_name="Jane Doe"),
            make_quote(id="2", customer_name="John Smith"),
            make_quote(id="3"),
        ]
        assert [q.id for q in search_quotes(quotes, "DOE")] == ["1"]

    def test_blank_query_returns_all(self, make_quote):
        """Test empty and whitespace queries match everything."""
        quotes = [make_quote(id="1"), make_quote(id="2")]
        assert search_quotes(quotes, "") == quotes
        assert search_quotes(quotes, "   ") == quotes

    def test_query_is_trimmed(self, make_quote):
        """Test surrounding whitespace is ignored."""
        quotes = [make_quote(id="1", customer_name="Jane Doe")]
        assert search_quotes(quotes, "  jane ") == quotes

    def test_no_match(self, make_quote):
        """Test a query matching nothing returns an empty list."""
        assert search_quotes([make_quote(customer_name="Jane")], "zzz") == []


class TestDuplicateQuoteData:
    """Tests for create_duplicate_quote_data."""

    def test_copies_pricing_and_items(self, make_quote, make_item):
        """Test duplicate data carries customer, items, totals and text."""
        items = (
            make_item("Lawn mowing", 2, 45.0, service_id="s1"),
            make_item("Haul away", 1, 35.0),
        )
        quote = make_quote(
            customer_name="Jane Doe",
            items=items,
            subtotal=125.0,
            total=112.5,
            discount_type=DiscountType.PERCENTAGE,
            discount_value=10.0,
            notes="Back gate code 1234",
            terms="Net 7",
        )

        data = create_duplicate_quote_data(quote)

        assert data.customer_id == quote.customer_id
        assert data.subtotal == 125.0
        assert data.total == 112.5
        assert data.discount_type == DiscountType.PERCENTAGE
        assert data.discount_value == 10.0
        assert data.notes == "Back gate code 1234"
        assert data.terms == "Net 7"
        assert [(i.service_name, i.quantity, i.unit_price, i.total_price, i.service_id) for i in data.items] == [
            ("Lawn mowing", 2, 45.0, 90.0, "s1"),
            ("Haul away", 1, 35.0, 35.0, None),
        ]

    def test_without_items(self, make_quote):
        """Test a quote whose items were not loaded duplicates with no items."""
        data = create_duplicate_quote_data(make_quote(items=None))
        assert data.items == ()

    def test_leaves_out_identity(self, make_quote):
        """Test identity, number, status and validity are not part of the copy."""
        data = create_duplicate_quote_data(make_quote())
        for name in ("id", "quote_number", "status", "created_at", "valid_until"):
            assert not hasattr(data, name)


class TestExpiry:
    """Tests for is_quote_expired and get_expired_quotes."""

    def test_expired_strictly_before_now(self, make_quote):
        """Test a quote expires only once its deadline has passed."""
        now = BASE + timedelta(days=10)
        assert is_quote_expired(make_quote(valid_until=now - timedelta(seconds=1)), now)
        assert not is_quote_expired(make_quote(valid_until=now), now)
        assert not is_quote_expired(make_quote(valid_until=now + timedelta(days=1)), now)

    def test_no_deadline_never_expires(self, make_quote):
        """Test a quote without validity date never expires."""
        assert not is_quote_expired(make_quote(valid_until=None), BASE + timedelta(days=3650))

    def test_only_pending_quotes_are_expired(self, make_quote):
        """Test accepted and already expired quotes are not returned."""
        past = BASE - timedelta(days=1)
        quotes = [
            make_quote(id="1", status=QuoteStatus.PENDING, valid_until=past),
            make_quote(id="2", status=QuoteStatus.ACCEPTED, valid_until=past),
            make_quote(id="3", status=QuoteStatus.EXPIRED, valid_until=past),
            make_quote(id="4", status=QuoteStatus.PENDING, valid_until=BASE + timedelta(days=1)),
            make_quote(id="5", status=QuoteStatus.PENDING, valid_until=None),
        ]

        expired = get_expired_quotes(quotes, BASE)

        assert [q.id for q in expired] == ["1"]
        assert expired[0].status == QuoteStatus.PENDING
