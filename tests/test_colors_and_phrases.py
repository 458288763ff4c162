from dangerzone.logic.colors import class_hue
from dangerzone.voice.phrases import LABELS_ES, alert_phrase, message, object_list, translate


def test_class_hue_matches_string_hash() -> None:
    assert class_hue("") == 0
    assert class_hue("a") == 97
    assert class_hue("ab") == 225


def test_class_hue_is_stable_and_in_range() -> None:
    for label in LABELS_ES:
        hue = class_hue(label)
        assert 0 <= hue < 360
        assert class_hue(label) == hue


def test_long_labels_wrap_in_32_bits() -> None:
    # long enough to overflow a signed 32-bit accumulator several times
    assert 0 <= class_hue("refrigerator toothbrush teddy bear") < 360


def test_translation_falls_back_to_the_label() -> None:
    assert translate("person", "es") == "persona"
    assert translate("person", "en") == "person"
    assert translate("unknown thing", "es") == "unknown thing"


def test_object_list_is_comma_joined() -> None:
    assert object_list(["person", "cup"], "es") == "persona, taza"


def test_messages_per_language() -> None:
    assert message("danger detected", "es") == "PELIGRO DETECTADO"
    assert message("danger detected", "en") == "DANGER DETECTED"
    assert alert_phrase("en") == "Alert! Person in danger zone."
    assert alert_phrase("fr") == "Alert! Person in danger zone."
