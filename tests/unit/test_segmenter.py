"""Unit tests for quantity/item segmentation and size extraction."""
import pytest
from voice_order.services.lexicon.languages import Language
from voice_order.services.ordering.models import Size
from voice_order.services.ordering.normalizer import normalize_transcript
from voice_order.services.ordering.segmenter import extract_items
from voice_order.services.ordering.sizes import extract_size


class TestSegmenter:
    """Test item segmentation."""

    def test_quantity_binds_following_words(self):
        """Test a number word starts an item that ends at a request marker."""
        items = extract_items("zwei kaffee bitte", Language.DE_CH)

        assert len(items) == 1
        assert items[0].raw_name == "kaffee"
        assert items[0].quantity == 2
        assert items[0].position == 0

    def test_conjunction_splits_items(self):
        """Test conjunctions end an item span."""
        items = extract_items("zwei kaffee und drü croissant", Language.DE_CH)

        assert [(item.raw_name, item.quantity) for item in items] == [("kaffee", 2), ("croissant", 3)]
        assert [item.position for item in items] == [0, 3]

    def test_digit_quantity(self):
        """Test digit sequences are read as quantities."""
        items = extract_items("3 croissant", Language.DE_CH)
        assert items[0].quantity == 3

    def test_zero_is_not_a_quantity(self):
        """Test zero does not produce an item."""
        assert extract_items("0 kaffee", Language.DE_CH) == []

    @pytest.mark.parametrize("word", ["zwei", "zwöi", "zwo", "zwe"])
    def test_dialect_spellings(self, word):
        """Test each dialect spelling of two resolves to 2."""
        items = extract_items(f"{word} bier", Language.DE_CH)
        assert items[0].quantity == 2
        assert items[0].raw_name == "bier"

    def test_two_word_number_phrase(self):
        """Test multi-word quantities consume both words."""
        items = extract_items("es paar croissant", Language.DE_CH)

        assert len(items) == 1
        assert items[0].quantity == 2
        assert items[0].raw_name == "croissant"

    def test_size_stripped_from_item(self):
        """Test sizes are extracted from the item span."""
        items = extract_items("ein grosses bier", Language.DE_CH)

        assert items[0].raw_name == "bier"
        assert items[0].size == Size.LARGE

    def test_modification_keyword_ends_span(self):
        """Test modification keywords end an item span."""
        items = extract_items("two large coffees with milk", Language.EN)

        assert len(items) == 1
        assert items[0].raw_name == "coffees"
        assert items[0].size == Size.LARGE

    def test_french_items(self):
        """Test French number words and conjunctions."""
        items = extract_items("deux croissants et un café", Language.FR)
        assert [(item.raw_name, item.quantity) for item in items] == [("croissants", 2), ("café", 1)]

    def test_italian_items(self):
        """Test Italian number words and conjunctions."""
        items = extract_items("due cappuccini e una brioche", Language.IT)
        assert [(item.raw_name, item.quantity) for item in items] == [("cappuccini", 2), ("brioche", 1)]

    def test_template_fallback(self):
        """Test sentence templates yield one item when no quantity is given."""
        items = extract_items("i'd like a cappuccino please", Language.EN)

        assert len(items) == 1
        assert items[0].raw_name == "cappuccino"
        assert items[0].quantity == 1
        assert items[0].position == 3

    def test_template_capture_cut_at_modification(self):
        """Test the template capture stops at a modification keyword."""
        items = extract_items("ich hätt gern e rösti ohni chäs", Language.DE_CH)

        assert [(item.raw_name, item.quantity) for item in items] == [("rösti", 1)]

    @pytest.mark.parametrize(
        "transcript,language,expected",
        [
            (
                "Ich hätte gerne zwei Cheeseburger und einmal große Pommes",
                Language.DE,
                [("cheeseburger", 2, None), ("pommes", 1, Size.LARGE)],
            ),
            (
                "Ich hätt gern zwöi Chäsburger und einisch grossi Pommes",
                Language.DE_CH,
                [("chäsburger", 2, None), ("pommes", 1, Size.LARGE)],
            ),
            (
                "zwei grossi kafi und eis chlises gipfeli",
                Language.DE_CH,
                [("kaffee", 2, Size.LARGE), ("croissant", 1, Size.SMALL)],
            ),
        ],
    )
    def test_times_words_and_inflected_sizes(self, transcript, language, expected):
        """Test '-mal'/'-isch' quantities and inflected size adjectives."""
        items = extract_items(normalize_transcript(transcript, language), language)
        assert [(item.raw_name, item.quantity, item.size) for item in items] == expected

    @pytest.mark.parametrize(
        "transcript,quantity",
        [
            ("föif bier", 5),
            ("elf bier", 11),
            ("zwölf gipfeli", 12),
            ("nüünzäh kafi", 19),
            ("drüssg croissant", 30),
            ("hundert bier", 100),
        ],
    )
    def test_dialect_number_words(self, transcript, quantity):
        """Test dialect number spellings resolve after normalization."""
        items = extract_items(normalize_transcript(transcript, Language.DE_CH), Language.DE_CH)

        assert len(items) == 1
        assert items[0].quantity == quantity

    @pytest.mark.parametrize(
        "transcript,language,expected",
        [
            ("Ich hätte gerne Pommes", Language.DE, "pommes"),
            ("ich hätte gern einen kaffee", Language.DE, "kaffee"),
            ("ich hätt gärn e rösti", Language.DE_CH, "rösti"),
        ],
    )
    def test_template_accepts_gerne_variants(self, transcript, language, expected):
        """Test ordering templates cover 'gern', 'gerne' and 'gärn'."""
        items = extract_items(normalize_transcript(transcript, language), language)
        assert [(item.raw_name, item.quantity) for item in items] == [(expected, 1)]

    @pytest.mark.parametrize(
        "normalized,language",
        [
            ("", Language.DE_CH),
            ("und oder aber", Language.DE),
            ("zwei und", Language.DE_CH),
            ("zwei gross", Language.DE_CH),
        ],
    )
    def test_nothing_recognized(self, normalized, language):
        """Test transcripts without items yield no items."""
        assert extract_items(normalized, language) == []

    def test_quantities_positive(self):
        """Test every extracted quantity is a positive integer."""
        transcripts = [
            "zwei kaffee und drü croissant",
            "10 bier und zäh wasser",
            "eis tee. zwänzg croissant",
            "0 kaffee und 1 tee",
        ]
        for normalized in transcripts:
            for item in extract_items(normalized, Language.DE_CH):
                assert isinstance(item.quantity, int)
                assert item.quantity >= 1


class TestSizeExtractor:
    """Test size extraction."""

    def test_extracts_and_strips(self):
        """Test the size word is removed from the name."""
        assert extract_size("grosses bier", Language.DE_CH) == (Size.LARGE, "bier")

    def test_small_wins_tie_break(self):
        """Test small is checked before large."""
        assert extract_size("small large coffee", Language.EN) == (Size.SMALL, "large coffee")

    def test_case_insensitive(self):
        """Test size words match regardless of case."""
        assert extract_size("Large Coffee", Language.EN) == (Size.LARGE, "Coffee")

    def test_whole_words_only(self):
        """Test size words inside other words are ignored."""
        assert extract_size("smallville coffee", Language.EN) == (None, "smallville coffee")

    def test_trailing_size(self):
        """Test sizes after the noun are found too."""
        assert extract_size("cappuccino grande", Language.IT) == (Size.LARGE, "cappuccino")

    def test_regular_is_medium(self):
        """Test 'regular' is a medium size."""
        assert extract_size("regular tea", Language.EN) == (Size.MEDIUM, "tea")
