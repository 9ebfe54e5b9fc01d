import logging

import pytest

from errorset import FrozenMessageSetError, LocalizedMessage, Message, MessageSet, ValidationError
from errorset.predicates import default_registry


class RecordingTranslator:
    def __init__(self, catalog):
        self.catalog = catalog
        self.calls = []

    def __call__(self, template, locale, tokens):
        self.calls.append((template, locale))
        return self.catalog.get(locale, {}).get(template, template).format(**tokens)


CATALOG = {
    "en": {"filled": "must be filled"},
    "fr": {"filled": "doit etre rempli"},
}


def test_add_appends_to_source_and_live_messages():
    age = Message("must be an integer", ("age",))
    name = Message("must be filled", ("name",))

    errors = MessageSet().add(age).add(name)

    assert errors.messages == [age, name]
    assert errors.source_messages == [age, name]
    assert len(errors) == 2
    assert list(errors) == [age, name]


def test_add_does_not_deduplicate():
    errors = MessageSet()
    errors.add(Message("must be filled", ("age",))).add(Message("must be filled", ("age",)))
    assert len(errors) == 2
    assert errors.to_dict() == {"age": ["must be filled"]}


def test_export_is_cached_until_set_changes():
    errors = MessageSet([Message("must be filled", ("age",))])
    first = errors.to_dict()
    assert errors.to_dict() is first

    errors.add(Message("must be filled", ("name",)))
    second = errors.to_dict()
    assert second is not first
    assert second == {"age": ["must be filled"], "name": ["must be filled"]}


def test_freeze_evaluates_each_localized_message_once():
    translator = RecordingTranslator(CATALOG)
    errors = MessageSet(
        [Message("must be an integer", ("age",)), LocalizedMessage("filled", ("name",), translator=translator)],
        {"locale": "en"},
    )

    frozen = errors.freeze()
    tree = frozen.to_dict()

    assert frozen is errors
    assert errors.frozen
    assert tree == {"age": ["must be an integer"], "name": ["must be filled"]}
    assert errors.messages[1] == Message("must be filled", ("name",))
    assert isinstance(errors.source_messages[1], LocalizedMessage)

    errors.freeze()
    assert translator.calls == [("filled", "en")]
    assert errors.to_dict() is tree


def test_freeze_with_full_option_prefixes_paths():
    errors = MessageSet([LocalizedMessage("must be filled", ("user", "name"))], {"full": True}).freeze()
    assert errors.to_dict() == {"user": {"name": ["user.name must be filled"]}}


def test_add_after_freeze_raises():
    errors = MessageSet().freeze()
    with pytest.raises(FrozenMessageSetError):
        errors.add(Message("must be filled", ("age",)))


def test_failed_evaluation_leaves_set_unfrozen():
    def broken(template, locale, tokens):
        raise LookupError("missing translation")

    plain = Message("must be an integer", ("age",))
    localized = LocalizedMessage("filled", ("name",), translator=broken)
    errors = MessageSet([plain, localized])

    with pytest.raises(LookupError):
        errors.freeze()

    assert not errors.frozen
    assert errors.messages == [plain, localized]


def test_freeze_logs_timing(caplog):
    caplog.set_level(logging.DEBUG, logger="errorset.message_set")
    MessageSet([Message("must be filled", ("age",)), LocalizedMessage("filled", ("name",))]).freeze()
    timings = [record for record in caplog.records if "message_set.freeze took" in record.message]
    assert len(timings) == 1
    assert timings[0].count == 1
    assert timings[0].elapsed_ms >= 0


def test_merge_returns_self_when_nothing_changes():
    errors = MessageSet([Message("must be filled", ("age",))])
    assert errors.merge(list(errors.messages)) is errors
    assert errors.merge(errors) is errors


def test_merge_unions_and_deduplicates_in_order():
    a = Message("must be filled", ("age",))
    b = Message("must be filled", ("name",))
    c = Message("must be filled", ("email",))
    errors = MessageSet([a, b])

    merged = errors.merge([b, c])

    assert merged is not errors
    assert merged.frozen
    assert merged.messages == [b, c, a]
    assert merged.source_messages == [a, b]
    assert errors.messages == [a, b]


def test_merge_with_new_locale_reevaluates_localized_messages():
    translator = RecordingTranslator(CATALOG)
    plain = Message("must be an integer", ("age",))
    localized = LocalizedMessage("filled", ("name",), translator=translator)
    errors = MessageSet([plain, localized], {"locale": "en"}).freeze()

    french = errors.merge([], locale="fr")

    assert french.locale == "fr"
    assert french.frozen
    assert french.to_dict() == {"age": ["must be an integer"], "name": ["doit etre rempli"]}
    assert errors.to_dict() == {"age": ["must be an integer"], "name": ["must be filled"]}
    assert translator.calls == [("filled", "en"), ("filled", "fr")]


def test_merge_drops_unresolved_messages_of_open_set():
    localized = LocalizedMessage("filled", ("name",), translator=RecordingTranslator(CATALOG))
    errors = MessageSet([localized], {"locale": "en"})

    merged = errors.merge([], locale="fr")

    assert merged.messages == [Message("doit etre rempli", ("name",))]


def test_filter_by_builtin_predicates():
    base = Message.base_message("payload is invalid")
    age = Message("must be filled", ("age",))
    localized = LocalizedMessage("filled", ("name",))
    errors = MessageSet([base, age, localized])

    assert errors.filter("base").messages == [base]
    assert errors.filter("localized").messages == [localized]
    assert errors.filter("resolved").messages == [base, age]
    assert errors.filter().messages == [base, age, localized]


def test_filter_excludes_messages_without_the_predicate():
    registry = default_registry()
    registry.register("critical", lambda message: message.meta.get("level") == "critical", message_type=Message)
    critical = Message("must be unique", ("email",), {"level": "critical"})
    minor = Message("must be filled", ("age",))
    localized = LocalizedMessage("filled", ("name",), {"level": "critical"})
    errors = MessageSet([critical, minor, localized], registry=registry)

    assert errors.filter("critical").messages == [critical]
    assert errors.filter("unknown").messages == []


def test_filter_composition_matches_combined_filter():
    messages = [
        Message.base_message("payload is invalid"),
        LocalizedMessage("filled"),
        Message("must be filled", ("age",)),
        Message.base_message("request expired"),
    ]
    errors = MessageSet(messages)

    chained = errors.filter("base").filter("resolved")
    combined = errors.filter("base", "resolved")

    assert chained == combined
    assert chained.messages == [messages[0], messages[3]]


def test_filtered_set_owns_its_source():
    errors = MessageSet([Message("must be filled", ("age",))], {"locale": "en"})
    filtered = errors.filter("resolved")
    assert filtered.source_messages == filtered.messages
    assert filtered.source_messages is not errors.source_messages
    assert filtered.locale is None


def test_lookup_helpers():
    errors = MessageSet([Message("must be filled", ("age",))])
    assert errors["age"] == ["must be filled"]
    assert errors["name"] is None
    assert errors.fetch("age") == ["must be filled"]
    with pytest.raises(KeyError):
        errors.fetch("name")


def test_empty_set():
    errors = MessageSet()
    assert errors.empty
    assert not errors
    assert errors.to_dict() == {}
    errors.raise_if_errors()


def test_equality_uses_messages_and_options():
    age = Message("must be filled", ("age",))
    assert MessageSet([age]) == MessageSet([age])
    assert MessageSet([age], {"locale": "en"}) != MessageSet([age])


def test_placeholders_follow_source_paths():
    errors = MessageSet(
        [
            Message("is invalid", ("tags",)),
            Message("must be filled", ("tags", "name")),
            Message("must be filled", ("address", "city")),
        ]
    )
    assert errors.unique_paths == [("tags",), ("tags", "name"), ("address", "city")]
    assert errors.placeholders == {"tags": [[], {"name": []}], "address": {"city": []}}


def test_raise_if_errors_raises_validation_error():
    errors = MessageSet([Message("must be filled", ("items", 0, "name"))])
    with pytest.raises(ValidationError) as excinfo:
        errors.raise_if_errors()
    assert excinfo.value.errors == {"items": {0: {"name": ["must be filled"]}}}
    assert errors.frozen


def test_open_set_export_uses_configured_locale_and_full():
    translator = RecordingTranslator(CATALOG)
    errors = MessageSet(
        [LocalizedMessage("filled", ("name",), translator=translator)],
        {"locale": "fr", "full": True},
    )

    assert errors.to_dict() == {"name": ["name doit etre rempli"]}
    assert errors.fetch("name") == ["name doit etre rempli"]
    assert not errors.frozen
    assert isinstance(errors.messages[0], LocalizedMessage)


def test_merge_resolves_incoming_localized_messages():
    translator = RecordingTranslator(CATALOG)
    incoming = LocalizedMessage("filled", ("age",), translator=translator)

    merged = MessageSet([]).merge([incoming], locale="fr")

    assert merged.messages == [Message("doit etre rempli", ("age",))]
    assert merged.to_dict() == {"age": ["doit etre rempli"]}
    with pytest.raises(ValidationError) as excinfo:
        merged.raise_if_errors()
    assert str(excinfo.value) == "age: doit etre rempli"
