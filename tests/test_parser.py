import pytest

from voice_expense.domain.categories import CATEGORY_NAMES, Category, match_category
from voice_expense.errors import InputTooLongError, InvalidInputError
from voice_expense.parsing.amount import extract_amount
from voice_expense.parsing.voice import extract_description, parse_voice_command


def test_spent_on_food() -> None:
    res = parse_voice_command("spent 500 on food")
    assert res.amount == 500
    assert res.category == "Food"
    assert res.needs_review is False


def test_rupees_on_food_today() -> None:
    res = parse_voice_command("I spent 500 rupees on food today")
    assert res.amount == 500
    assert res.category == "Food"
    assert res.description == "I spent on food today"
    assert res.needs_review is False
    assert res.confidence == pytest.approx(1.0)


def test_decimal_amount_with_command_words() -> None:
    res = parse_voice_command("add 250.50 for lunch")
    assert res.amount == pytest.approx(250.50)
    assert res.category == "Food"
    assert res.description == "For lunch"
    assert res.needs_review is False


def test_no_amount_no_keyword() -> None:
    res = parse_voice_command("hello there")
    assert res.category == "Other"
    assert res.amount is None
    assert res.needs_review is True
    assert res.description == "Hello there"
    assert res.confidence == pytest.approx(0.2)


def test_amount_adds_exactly_half_confidence() -> None:
    without_amount = parse_voice_command("hello there")
    with_amount = parse_voice_command("hello there 50")
    assert with_amount.confidence - without_amount.confidence == pytest.approx(0.5)


def test_same_transcript_same_result() -> None:
    transcript = "Paid 1,200 for the electricity bill"
    assert parse_voice_command(transcript) == parse_voice_command(transcript)


def test_thousands_separator() -> None:
    res = parse_voice_command("Paid 1,200 for the electricity bill")
    assert res.amount == 1200
    assert res.category == "Bills"


def test_spelled_amount() -> None:
    res = parse_voice_command("spent fifty on a taxi")
    assert res.amount == 50
    assert res.category == "Transport"
    # Word amounts stay in the description
    assert res.description == "Fifty on a taxi"


def test_compound_spelled_amount() -> None:
    res = parse_voice_command("two hundred and fifty for groceries")
    assert res.amount == 250
    assert res.category == "Food"


def test_zero_is_not_an_amount() -> None:
    res = parse_voice_command("0 for the movie")
    assert res.amount is None
    assert res.category == "Entertainment"
    assert res.needs_review is True


def test_overflowing_digit_run_is_not_an_amount() -> None:
    assert extract_amount("9" * 400) is None

    res = parse_voice_command("spent " + "9" * 400 + " on food")
    assert res.amount is None
    assert res.category == "Food"
    assert res.needs_review is True


def test_category_with_most_hits_wins() -> None:
    # one Travel keyword ("trip") against two Transport keywords
    res = parse_voice_command("trip by train and bus 300")
    assert res.category == "Transport"


def test_category_tie_keeps_first_declared() -> None:
    assert match_category("hotel taxi") is Category.TRAVEL


def test_description_falls_back_to_category() -> None:
    res = parse_voice_command("500")
    assert res.description == "Other expense"
    assert res.needs_review is True
    assert res.confidence == pytest.approx(0.7)


def test_description_fallback_uses_resolved_category() -> None:
    assert extract_description("500", 500.0, Category.FOOD) == "Food expense"


def test_trailing_command_word_removed() -> None:
    res = parse_voice_command("doctor visit 800 paid")
    assert res.description == "Doctor visit"
    assert res.category == "Healthcare"


def test_currency_symbol_removed_from_description() -> None:
    res = parse_voice_command("$20 netflix")
    assert res.amount == 20
    assert res.description == "Netflix"


def test_currency_symbol_only_extractor() -> None:
    # digits always win first; a symbol alone gives nothing to extract
    assert extract_amount("₹ on snacks") is None
    assert extract_amount("€ 12.5 coffee") == pytest.approx(12.5)


def test_result_invariants() -> None:
    for transcript in ("xyz", "99 bottles", "movie and book and bus", "nine"):
        res = parse_voice_command(transcript)
        assert res.category in CATEGORY_NAMES
        assert res.amount is None or res.amount > 0
        assert 0.0 <= res.confidence <= 1.0


def test_needs_review_serializes_camel_case() -> None:
    data = parse_voice_command("spent 500 on food").model_dump(by_alias=True)
    assert data["needsReview"] is False
    assert "needs_review" not in data


def test_empty_transcript() -> None:
    with pytest.raises(InvalidInputError):
        parse_voice_command("")


def test_blank_transcript() -> None:
    with pytest.raises(InvalidInputError):
        parse_voice_command("   \n ")


@pytest.mark.parametrize("value", [None, 123, ["spent 5"]])
def test_non_string_transcript(value: object) -> None:
    with pytest.raises(InvalidInputError):
        parse_voice_command(value)  # type: ignore[arg-type]


def test_length_boundary() -> None:
    parse_voice_command("a" * 1000)
    with pytest.raises(InputTooLongError) as exc_info:
        parse_voice_command("a" * 1001)
    assert exc_info.value.max_length == 1000
    assert exc_info.value.length == 1001
