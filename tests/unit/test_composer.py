"""Unit tests for DraftComposer."""

from __future__ import annotations

import copy

import pytest
from pydantic import ValidationError

from kuchikomi.composition import (
    FIELD_FILLERS,
    POLITE_CLOSING,
    DraftComposer,
    GenerateOptions,
)
from kuchikomi.masking.backends.memory_backend import MemoryPatternBackend
from kuchikomi.models import STYLE_ORDER, DraftStyle, ReviewField
from kuchikomi.normalization import is_polite
from tests.fakes.fake_random import ConstantRandom, SequenceRandom


@pytest.fixture
def composer(patterns) -> DraftComposer:
    return DraftComposer(patterns)


class TestFragments:
    def test_short_sequence(self, composer, full_review) -> None:
        fragments = composer.fragments(full_review, DraftStyle.SHORT)
        assert [f.text for f in fragments] == [
            "カットとカラーをお願いしました",
            "仕上がりがとても良かったです",
            "駐車場が広くて便利です",
        ]
        assert [f.is_terminal for f in fragments] == [False, False, True]

    def test_standard_uses_every_field(self, composer, full_review) -> None:
        fragments = composer.fragments(full_review, DraftStyle.STANDARD)
        assert len(fragments) == 4
        assert fragments[0].text == "今回はカットとカラーをお願いしました"
        assert fragments[2].text == "担当の方が丁寧に説明してくれました"

    def test_polite_ends_with_closing(self, composer, full_review) -> None:
        fragments = composer.fragments(full_review, DraftStyle.POLITE)
        assert fragments[0].text == "先日はカットとカラーをお願いしました"
        assert fragments[-1].text == POLITE_CLOSING
        assert fragments[-1].is_terminal

    def test_short_keeps_first_sentence_only(self, composer, full_review) -> None:
        full_review["notes"] = "駐車場がある。予約は電話でできた"
        fragments = composer.fragments(full_review, DraftStyle.SHORT)
        assert fragments[-1].text == "駐車場があります"

    def test_optional_fields_skipped_when_empty(self, composer) -> None:
        review = {"visit_purpose": "カット", "impression": "満足", "staff": "  ", "notes": None}
        assert len(composer.fragments(review, DraftStyle.STANDARD)) == 2
        assert len(composer.fragments(review, DraftStyle.POLITE)) == 3

    def test_required_fields_use_filler(self, composer) -> None:
        fragments = composer.fragments({}, DraftStyle.SHORT)
        assert [f.text for f in fragments] == [
            FIELD_FILLERS[ReviewField.VISIT_PURPOSE],
            FIELD_FILLERS[ReviewField.IMPRESSION],
        ]

    def test_punctuation_only_value_uses_filler(self, composer, full_review) -> None:
        full_review["impression"] = "。。"
        fragments = composer.fragments(full_review, DraftStyle.STANDARD)
        assert fragments[1].text == FIELD_FILLERS[ReviewField.IMPRESSION]

    def test_noun_value_closed_politely(self, composer) -> None:
        review = {"visit_purpose": "カット", "impression": "大満足"}
        fragments = composer.fragments(review, DraftStyle.STANDARD)
        assert [f.text for f in fragments] == ["今回はカットです", "大満足です"]


class TestCompose:
    def test_standard_text_with_constant_low_source(self, composer, full_review, zero_random) -> None:
        draft = composer.compose(full_review, DraftStyle.STANDARD, random_source=zero_random)
        assert draft.text == (
            "今回はカットとカラーをお願いしました。"
            "また、仕上がりがとても良かったです。"
            "さらに、担当の方が丁寧に説明してくれました。"
            "また、駐車場が広くて便利です。"
        )
        assert draft.style == DraftStyle.STANDARD
        assert draft.masked is False

    def test_standard_text_with_constant_high_source(self, composer, full_review, high_random) -> None:
        draft = composer.compose(full_review, DraftStyle.STANDARD, random_source=high_random)
        assert draft.text == (
            "今回はカットとカラーをお願いしました。"
            "それに、仕上がりがとても良かったです。"
            "担当の方が丁寧に説明してくれました。"
            "駐車場が広くて便利です。"
        )

    def test_short_text(self, composer, full_review, zero_random) -> None:
        draft = composer.compose(full_review, DraftStyle.SHORT, random_source=zero_random)
        assert draft.text == (
            "カットとカラーをお願いしました。"
            "また、仕上がりがとても良かったです。"
            "そして、駐車場が広くて便利です。"
        )

    def test_polite_closing_not_doubled_with_connector(self, composer, full_review, zero_random) -> None:
        draft = composer.compose(full_review, DraftStyle.POLITE, random_source=zero_random)
        assert draft.text.endswith("。また利用させていただきたいと思います。")
        assert "、また利用" not in draft.text

    def test_fragment_opening_with_connector_not_prefixed(self, composer, full_review, zero_random) -> None:
        full_review["notes"] = "また来たいと思った"
        draft = composer.compose(full_review, DraftStyle.STANDARD, random_source=zero_random)
        assert draft.text == (
            "今回はカットとカラーをお願いしました。"
            "さらに、仕上がりがとても良かったです。"
            "それに、担当の方が丁寧に説明してくれました。"
            "また来たいと思いました。"
        )
        assert draft.text.endswith("。また来たいと思いました。")
        assert "また、また" not in draft.text

    def test_polite_text_plans_around_closing_connector(self, composer, full_review, zero_random) -> None:
        draft = composer.compose(full_review, DraftStyle.POLITE, random_source=zero_random)
        assert draft.text == (
            "先日はカットとカラーをお願いしました。"
            "さらに、仕上がりがとても良かったです。"
            "加えて、担当の方が丁寧に説明してくれました。"
            "さらに、駐車場が広くて便利です。"
            "また利用させていただきたいと思います。"
        )

    def test_connector_before_closing_differs_from_its_opener(self, composer, zero_random) -> None:
        review = {"visit_purpose": "ランチで利用した", "impression": "美味しかった"}
        draft = composer.compose(review, DraftStyle.POLITE, random_source=zero_random)
        assert draft.text == (
            "先日はランチで利用しました。"
            "さらに、美味しかったです。"
            "また利用させていただきたいと思います。"
        )

    def test_noun_final_fragment_has_no_blunt_interior(self, composer, full_review, zero_random) -> None:
        full_review["impression"] = "値段は高めだが、味は最高"
        draft = composer.compose(full_review, DraftStyle.STANDARD, random_source=zero_random)
        assert "値段は高めですが、味は最高です。" in draft.text
        assert "だが" not in draft.text

    def test_no_dangling_connector(self, composer, zero_random) -> None:
        draft = composer.compose({}, DraftStyle.POLITE, random_source=zero_random)
        assert "、。" not in draft.text
        assert "。。" not in draft.text
        assert draft.text.endswith("。")

    def test_anonymize_masks_and_collects_notices(self, composer, full_review, zero_random) -> None:
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        draft = composer.compose(
            full_review, DraftStyle.STANDARD, anonymize=True, random_source=zero_random
        )
        assert draft.masked is True
        assert "[電話番号] までご連絡ください" in draft.text
        assert "090-1234-5678" not in draft.text
        assert len(draft.notices) == 1

    def test_without_anonymize_text_is_kept(self, composer, full_review, zero_random) -> None:
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        draft = composer.compose(full_review, DraftStyle.STANDARD, random_source=zero_random)
        assert draft.masked is False
        assert "090-1234-5678" in draft.text
        assert draft.notices == ()

    def test_empty_pattern_table_never_masks(self, full_review, zero_random) -> None:
        composer = DraftComposer(MemoryPatternBackend().list_patterns())
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        draft = composer.compose(
            full_review, DraftStyle.SHORT, anonymize=True, random_source=zero_random
        )
        assert draft.masked is False

    def test_draft_is_frozen(self, composer, full_review, zero_random) -> None:
        draft = composer.compose(full_review, DraftStyle.SHORT, random_source=zero_random)
        with pytest.raises(ValidationError):
            draft.text = "changed"  # type: ignore[misc]


class TestGenerateAll:
    def test_three_drafts_in_order(self, composer, full_review) -> None:
        drafts = composer.generate_all(full_review)
        assert [d.style for d in drafts] == list(STYLE_ORDER)
        assert [d.style.value for d in drafts] == ["short", "standard", "polite"]

    def test_every_sentence_polite(self, composer, full_review) -> None:
        full_review["notes"] = "駐車場がある。値段は高めだが、味は良かった"
        for draft in composer.generate_all(full_review, GenerateOptions(random_source=ConstantRandom(0.0))):
            sentences = [s for s in draft.text.split("。") if s]
            assert sentences
            for sentence in sentences:
                assert is_polite(sentence), sentence
            assert "だが" not in draft.text

    def test_replayable_with_same_sequence(self, composer, full_review) -> None:
        values = [0.1, 0.6, 0.3, 0.8, 0.2]
        first = composer.generate_all(full_review, GenerateOptions(random_source=SequenceRandom(values)))
        second = composer.generate_all(full_review, GenerateOptions(random_source=SequenceRandom(values)))
        assert first == second

    def test_seeded_composer_replays(self, patterns, full_review) -> None:
        composer = DraftComposer(patterns, seed=7)
        assert composer.generate_all(full_review) == composer.generate_all(full_review)

    def test_options_default_to_input_flag(self, composer, full_review) -> None:
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        full_review["anonymize"] = True
        assert all(d.masked for d in composer.generate_all(full_review))

    def test_string_flag(self, composer, full_review) -> None:
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        full_review["anonymize"] = "true"
        assert all(d.masked for d in composer.generate_all(full_review))

    def test_explicit_options_override_input_flag(self, composer, full_review) -> None:
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        full_review["anonymize"] = True
        drafts = composer.generate_all(full_review, GenerateOptions(anonymize=False))
        assert not any(d.masked for d in drafts)

    def test_anonymize_by_default(self, patterns, full_review) -> None:
        composer = DraftComposer(patterns, anonymize_by_default=True)
        full_review.pop("anonymize")
        full_review["notes"] = "090-1234-5678 までご連絡ください"
        assert all(d.masked for d in composer.generate_all(full_review))

    def test_input_not_mutated(self, composer, full_review) -> None:
        before = copy.deepcopy(full_review)
        composer.generate_all(full_review, GenerateOptions(anonymize=True))
        assert full_review == before

    def test_non_mapping_input(self, composer) -> None:
        drafts = composer.generate_all(None)  # type: ignore[arg-type]
        assert len(drafts) == 3
        assert all(d.text for d in drafts)

    def test_default_composer_uses_packaged_table(self) -> None:
        assert DraftComposer().patterns
