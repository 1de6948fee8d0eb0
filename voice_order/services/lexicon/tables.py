"""Per-language lexicon tables.

Every supported language gets one immutable ``Lexicon``. The raw word lists
below are turned into read-only lookup structures once, on first use.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Pattern, Tuple, Union

from voice_order.services.lexicon.languages import Language, resolve_language
from voice_order.services.ordering.models import ModificationType, Size
from voice_order.services.ordering.tokens import (
    Phrase,
    collapse_vowels,
    phrase_pattern,
    to_phrases,
)


@dataclass(frozen=True)
class Lexicon:
    """Lookup tables for one language."""

    language: Language
    collapses_vowels: bool
    numbers: Mapping[str, int]
    synonyms: Mapping[str, str]
    canonical_terms: FrozenSet[str]
    filler_pattern: Optional[Pattern]
    size_patterns: Tuple[Tuple[Size, str, Pattern], ...]
    modification_phrases: Tuple[Tuple[ModificationType, Tuple[Phrase, ...]], ...]
    conjunctions: Tuple[Phrase, ...]
    request_markers: Tuple[Phrase, ...]
    boundary_phrases: Tuple[Phrase, ...]
    order_patterns: Tuple[Pattern, ...]
    greetings: Tuple[Phrase, ...]
    order_phrases: Tuple[Phrase, ...]
    yes_words: Tuple[Phrase, ...]
    no_words: Tuple[Phrase, ...]
    completion_phrases: Tuple[Phrase, ...]


_SWISS_GERMAN_NUMBERS = {
    "eis": 1, "ein": 1, "eine": 1, "ei": 1, "wenig": 1,
    # "es paar" (a couple) counts as 2
    "zwei": 2, "zwöi": 2, "zwo": 2, "zwee": 2, "es paar": 2,
    "drü": 3, "drei": 3, "drii": 3, "drüü": 3,
    "vier": 4, "vieri": 4,
    "füf": 5, "fünf": 5, "foif": 5, "föif": 5, "vill": 5, "viele": 5,
    "sächs": 6, "sechs": 6, "säggs": 6,
    "sibe": 7, "siebe": 7, "sibä": 7,
    "acht": 8, "achti": 8,
    "nün": 9, "neun": 9, "nüün": 9,
    "zäh": 10, "zehn": 10, "zää": 10,
    "elf": 11, "elfi": 11,
    "zwölf": 12, "zwölfi": 12,
    "drüzäh": 13, "vierzäh": 14, "füfzäh": 15, "sächzäh": 16,
    "sibzäh": 17, "achzäh": 18, "nüünzäh": 19,
    "zwänzg": 20, "zwanzig": 20,
    "drissig": 30, "driissg": 30, "drüssg": 30,
    "vierzg": 40, "vierzig": 40,
    "füfzg": 50, "fünfzig": 50,
    "sächzg": 60, "sibzg": 70, "achzg": 80, "nüünzg": 90,
    "hundert": 100, "tuusig": 1000,
    # Times-words: "einisch grossi pommes"
    "einisch": 1, "eimal": 1, "einmal": 1,
    "zwöimal": 2, "zweimal": 2, "zwoimal": 2,
    "drümal": 3, "dreimal": 3,
    "viermal": 4, "föifmal": 5, "füfmal": 5,
}

# Dialect product words -> standard German. Ingredient words (chäs, zibele)
# are left alone so modifier phrases keep the customer's wording.
_SWISS_GERMAN_FOOD_TERMS = {
    "kafi": "kaffee", "kaffi": "kaffee", "kaffe": "kaffee",
    "schoggi": "schokolade", "schoki": "schokolade",
    "bier": "bier", "bierli": "bier",
    "wii": "wein", "wiili": "wein",
    "wasser": "wasser",
    "hahne": "leitungswasser", "hahnewasser": "leitungswasser",
    "tee": "tee", "tii": "tee",
    "rösti": "rösti", "rööschti": "rösti",
    "brot": "brot",
    "brötli": "brötchen", "weggli": "brötchen",
    "gipfeli": "croissant",
    "znüni": "frühstück",
    "zmittag": "mittagessen",
    "znacht": "abendessen",
    "zvieri": "zwischenmahlzeit",
    "chli": "klein", "chlii": "klein",
    "gross": "gross",
    "mittel": "mittel",
    "normal": "normal",
}

_GERMAN_SIZES = {
    Size.SMALL: ["klein", "kleine", "kleiner", "kleines", "chli"],
    Size.MEDIUM: ["mittel", "mittlere", "mittlerer", "mittleres", "normal"],
    Size.LARGE: ["gross", "grosse", "grosser", "grosses", "groß", "große", "großer", "großes"],
}

# Dialect adjective endings (-i, -s, -e) on top of the standard forms
_SWISS_GERMAN_SIZES = {
    Size.SMALL: _GERMAN_SIZES[Size.SMALL] + ["chlini", "chline", "chlises", "chliner", "chlis"],
    Size.MEDIUM: _GERMAN_SIZES[Size.MEDIUM] + ["mittleri", "mittlers", "normali", "normals"],
    Size.LARGE: _GERMAN_SIZES[Size.LARGE] + ["grossi"],
}

_RAW_TABLES: Dict[Language, dict] = {
    Language.DE_CH: {
        "collapses_vowels": True,
        "fillers": ["äh", "ähm", "also", "halt", "ebe", "gäll", "oder"],
        "numbers": _SWISS_GERMAN_NUMBERS,
        "synonyms": _SWISS_GERMAN_FOOD_TERMS,
        "sizes": _SWISS_GERMAN_SIZES,
        "modifications": {
            ModificationType.ADD: ["mit", "dazu", "dezue", "extra", "meh"],
            ModificationType.REMOVE: ["ohni", "kei", "keine", "weg", "nöd"],
            ModificationType.CHANGE: ["statt", "anstatt", "astatt"],
        },
        "conjunctions": ["und", "oder", "aber", "mit"],
        "request_markers": ["bitte", "gern", "gärn", "chönd", "wär guet"],
        "order_patterns": [
            r"ich hätt g[eä]rn (?:e |es |en )?(.+)",
            r"ich möcht (?:e |es |en )?(.+)",
            r"ich nimm (?:e |es |en )?(.+)",
            r"gib mer (?:e |es |en )?(.+)",
            r"für mich (?:e |es |en )?(.+)",
            r"bitte (?:e |es |en )?(.+)",
            r"(?:e |es |en )?(.+) bitte",
        ],
        "greetings": ["grüezi", "guete tag", "hoi", "sali", "hallo"],
        "order_phrases": ["ich möcht", "ich hätt gern", "ich hätt gärn", "bitte", "bestelle"],
        "yes": ["ja", "jo", "genau", "sicher", "klar"],
        "no": ["nei", "nöd", "nein", "sicher nöd"],
        "completion": ["fertig", "das wärs", "das isch alles"],
    },
    Language.DE: {
        "fillers": ["äh", "ähm", "also", "halt", "eben", "oder"],
        "numbers": {
            "ein": 1, "eine": 1, "einen": 1,
            "zwei": 2, "drei": 3, "vier": 4, "fünf": 5,
            "sechs": 6, "sieben": 7, "acht": 8, "neun": 9, "zehn": 10,
            "elf": 11, "zwölf": 12,
            "einmal": 1, "zweimal": 2, "dreimal": 3, "viermal": 4, "fünfmal": 5,
        },
        "sizes": _GERMAN_SIZES,
        "modifications": {
            ModificationType.ADD: ["mit", "dazu", "extra", "mehr"],
            ModificationType.REMOVE: ["ohne", "kein", "keine", "weg", "nicht"],
            ModificationType.CHANGE: ["statt", "anstatt", "anstelle"],
        },
        "conjunctions": ["und", "oder", "aber", "mit"],
        "request_markers": ["bitte", "gerne", "könnten", "wäre gut"],
        "order_patterns": [
            r"ich hätte gerne? (?:ein |eine |einen )?(.+)",
            r"ich möchte (?:ein |eine |einen )?(.+)",
            r"ich nehme (?:ein |eine |einen )?(.+)",
            r"geben sie mir (?:ein |eine |einen )?(.+)",
            r"für mich (?:ein |eine |einen )?(.+)",
            r"bitte (?:ein |eine |einen )?(.+)",
            r"(?:ein |eine |einen )?(.+) bitte",
        ],
        "greetings": ["guten tag", "hallo", "guten morgen", "guten abend"],
        "order_phrases": ["ich möchte", "ich hätte gern", "ich hätte gerne", "bitte", "bestellen"],
        "yes": ["ja", "genau", "richtig", "korrekt"],
        "no": ["nein", "nicht", "falsch"],
        "completion": ["fertig", "das wärs", "das wäre alles"],
    },
    Language.FR: {
        "fillers": ["euh", "alors", "donc", "voilà"],
        "numbers": {
            "un": 1, "une": 1, "deux": 2, "trois": 3, "quatre": 4,
            "cinq": 5, "six": 6, "sept": 7, "huit": 8, "neuf": 9, "dix": 10,
        },
        "sizes": {
            Size.SMALL: ["petit", "petite"],
            Size.MEDIUM: ["moyen", "moyenne"],
            Size.LARGE: ["grand", "grande"],
        },
        "modifications": {
            ModificationType.ADD: ["avec", "plus", "extra"],
            ModificationType.REMOVE: ["sans", "pas de", "enlever"],
            ModificationType.CHANGE: ["au lieu de", "remplacer"],
        },
        "conjunctions": ["et", "ou", "mais", "avec"],
        "request_markers": ["s'il vous plaît", "s'il vous plait", "pourriez-vous"],
        "order_patterns": [
            r"je voudrais (?:un |une |des )?(.+)",
            r"je prends (?:un |une |des )?(.+)",
            r"donnez-moi (?:un |une |des )?(.+)",
            r"pour moi (?:un |une |des )?(.+)",
        ],
        "greetings": ["bonjour", "bonsoir", "salut"],
        "order_phrases": ["je voudrais", "je prends", "s'il vous plaît"],
        "yes": ["oui", "exactement", "correct"],
        "no": ["non", "pas"],
        "completion": ["c'est tout", "fini"],
    },
    Language.IT: {
        "fillers": ["ehm", "allora", "quindi", "ecco"],
        "numbers": {
            "uno": 1, "una": 1, "un": 1, "due": 2, "tre": 3, "quattro": 4,
            "cinque": 5, "sei": 6, "sette": 7, "otto": 8, "nove": 9, "dieci": 10,
        },
        "sizes": {
            Size.SMALL: ["piccolo", "piccola"],
            Size.MEDIUM: ["medio", "media"],
            Size.LARGE: ["grande"],
        },
        "modifications": {
            ModificationType.ADD: ["con", "più", "extra"],
            ModificationType.REMOVE: ["senza", "no", "togliere"],
            ModificationType.CHANGE: ["invece di", "sostituire"],
        },
        "conjunctions": ["e", "o", "ma", "con"],
        "request_markers": ["per favore", "potrebbe"],
        "order_patterns": [
            r"vorrei (?:un |una |uno )?(.+)",
            r"prendo (?:un |una |uno )?(.+)",
            r"mi dia (?:un |una |uno )?(.+)",
            r"per me (?:un |una |uno )?(.+)",
        ],
        "greetings": ["buongiorno", "buonasera", "ciao", "salve"],
        "order_phrases": ["vorrei", "prendo", "per favore"],
        "yes": ["sì", "esatto", "giusto"],
        "no": ["no", "non"],
        "completion": ["è tutto", "basta"],
    },
    Language.EN: {
        # "like" is not a filler here: "i'd like ..." is an order template.
        "fillers": ["uh", "um", "uhm", "you know", "well"],
        "numbers": {
            "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
            "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
        },
        "sizes": {
            Size.SMALL: ["small"],
            Size.MEDIUM: ["medium", "regular"],
            Size.LARGE: ["large"],
        },
        "modifications": {
            ModificationType.ADD: ["with", "add", "extra", "more"],
            ModificationType.REMOVE: ["without", "no", "remove"],
            ModificationType.CHANGE: ["instead of", "replace", "change"],
        },
        "conjunctions": ["and", "or", "but", "with"],
        "request_markers": ["please", "could you", "would like"],
        "order_patterns": [
            r"i(?:'d| would) like (?:a |an |some )?(.+)",
            r"i(?:'ll| will) have (?:a |an |some )?(.+)",
            r"can i (?:get|have) (?:a |an |some )?(.+)",
            r"i want (?:a |an |some )?(.+)",
            r"give me (?:a |an |some )?(.+)",
            r"(?:a |an |some )?(.+) please",
        ],
        "greetings": ["hello", "hi", "good morning", "good evening"],
        "order_phrases": ["i would like", "i want", "please", "order"],
        "yes": ["yes", "yeah", "correct", "right"],
        "no": ["no", "not", "wrong"],
        "completion": ["that's all", "that is all", "finished"],
    },
}


def _build_lexicon(language: Language, raw: dict) -> Lexicon:
    collapses = raw.get("collapses_vowels", False)
    key = collapse_vowels if collapses else (lambda word: word)

    numbers = dict(raw["numbers"])
    numbers.update({key(word): value for word, value in raw["numbers"].items()})
    synonyms = {key(word): canonical for word, canonical in raw.get("synonyms", {}).items()}

    size_patterns = tuple(
        (size, term, re.compile(r"(?<![\w'])%s(?![\w'])" % re.escape(term), re.IGNORECASE))
        for size in Size
        for term in raw["sizes"].get(size, [])
    )
    modification_phrases = tuple(
        (mod_type, to_phrases(raw["modifications"].get(mod_type, [])))
        for mod_type in ModificationType
    )
    keywords = [word for words in raw["modifications"].values() for word in words]

    return Lexicon(
        language=language,
        collapses_vowels=collapses,
        numbers=MappingProxyType(numbers),
        synonyms=MappingProxyType(synonyms),
        canonical_terms=frozenset(synonyms.values()),
        filler_pattern=phrase_pattern(raw["fillers"]),
        size_patterns=size_patterns,
        modification_phrases=modification_phrases,
        conjunctions=to_phrases(raw["conjunctions"]),
        request_markers=to_phrases(raw["request_markers"]),
        boundary_phrases=to_phrases(keywords + raw["conjunctions"] + raw["request_markers"]),
        order_patterns=tuple(
            re.compile(r"(?<![\w'])" + pattern) for pattern in raw["order_patterns"]
        ),
        greetings=to_phrases(raw["greetings"]),
        order_phrases=to_phrases(raw["order_phrases"]),
        yes_words=to_phrases(raw["yes"]),
        no_words=to_phrases(raw["no"]),
        completion_phrases=to_phrases(raw["completion"]),
    )


@lru_cache(maxsize=None)
def _lexicon_for(language: Language) -> Lexicon:
    return _build_lexicon(language, _RAW_TABLES[language])


def get_lexicon(language: Union[Language, str]) -> Lexicon:
    """
    Get the lexicon for a language.

    Raises:
        UnsupportedLanguageError: if the language has no lexicon
    """
    return _lexicon_for(resolve_language(language))
