"""Tests for question synthesis."""

from __future__ import annotations

import re

import pytest

from docs2questions.qa.config import GenerationOptions
from docs2questions.qa.generators import (
    BaseQuestionGenerator,
    ContextualQuestionGenerator,
    GenerativeQuestionGenerator,
    TemplateQuestionGenerator,
)
from docs2questions.qa.schema import StrategyTag
from docs2questions.qa.synthesizer import QuestionSynthesizer, question_id

EINSTEIN_CANDIDATES = [
    "Albert Einstein developed the theory of relativity",
    "It was a major breakthrough in physics and changed everything we know",
]

ALL_OPTIONS = [
    GenerationOptions(template=t, contextual=c, generative=g)
    for t in (True, False)
    for c in (True, False)
    for g in (True, False)
]


def first(bank):
    return bank[0]


def test_question_id():
    assert question_id(StrategyTag.CONTEXTUAL, 3) == "contextual-3"


def test_einstein_scenario_all_strategies():
    questions = QuestionSynthesizer(chooser=first).synthesize(EINSTEIN_CANDIDATES)

    assert [q.id for q in questions] == [
        "template-0",
        "contextual-0",
        "generative-0",
        "template-1",
        "contextual-1",
        "generative-1",
    ]
    assert [q.question_text for q in questions] == [
        "Who albert?",
        "What can you tell about Albert?",
        "What does the text say about Albert?",
        "Who it?",
        "What can you tell about It?",
        "What does the text say about It?",
    ]
    assert [q.source_sentence for q in questions] == [
        EINSTEIN_CANDIDATES[0]
    ] * 3 + [EINSTEIN_CANDIDATES[1]] * 3


def test_einstein_scenario_random_choice_mentions_anchor():
    questions = QuestionSynthesizer(seed=7).synthesize(EINSTEIN_CANDIDATES)

    assert len(questions) == 6
    for question in questions[:3]:
        assert "albert" in question.question_text.lower()
    for question in questions[3:]:
        assert "it" in re.findall(r"\w+", question.question_text.lower())


@pytest.mark.parametrize("options", ALL_OPTIONS)
@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_fan_out_law(options, count):
    candidates = [f"Candidate {i} is a sentence with words" for i in range(count)]
    questions = QuestionSynthesizer(seed=1).synthesize(candidates, options)

    enabled = options.enabled()
    assert len(questions) == count * len(enabled)
    expected = [(i, tag) for i in range(count) for tag in enabled]
    assert [(candidates.index(q.source_sentence), q.strategy) for q in questions] == expected


@pytest.mark.parametrize("strategy", list(StrategyTag))
def test_strategy_isolation(strategy):
    everything = QuestionSynthesizer(seed=99).synthesize(EINSTEIN_CANDIDATES)
    options = GenerationOptions(**{strategy.value: False})
    reduced = QuestionSynthesizer(seed=99).synthesize(EINSTEIN_CANDIDATES, options)

    assert reduced == [q for q in everything if q.strategy is not strategy]


def test_empty_candidates_yield_nothing():
    assert QuestionSynthesizer().synthesize([]) == []


def test_all_flags_disabled_yield_nothing():
    assert QuestionSynthesizer().synthesize(EINSTEIN_CANDIDATES, GenerationOptions.none()) == []


def test_ids_are_unique():
    candidates = [f"Sentence {i} is long enough to be chosen" for i in range(5)]
    questions = QuestionSynthesizer().synthesize(candidates)

    ids = [q.id for q in questions]
    assert len(ids) == len(set(ids)) == 15


def test_same_seed_reproduces_output():
    a = QuestionSynthesizer(seed=2024).synthesize(EINSTEIN_CANDIDATES * 2)
    b = QuestionSynthesizer(seed=2024).synthesize(EINSTEIN_CANDIDATES * 2)
    assert a == b


def test_questions_come_from_strategy_bank():
    banks = {
        StrategyTag.TEMPLATE: TemplateQuestionGenerator,
        StrategyTag.CONTEXTUAL: ContextualQuestionGenerator,
        StrategyTag.GENERATIVE: GenerativeQuestionGenerator,
    }
    synthesizer = QuestionSynthesizer(seed=5)

    for question in synthesizer.synthesize(EINSTEIN_CANDIDATES * 3):
        generator = banks[question.strategy]()
        anchor = question.source_sentence.split()[0]
        rendered = {generator.render(t, anchor) for t in generator.templates}
        assert question.question_text in rendered


def test_empty_sentence_uses_default_anchor():
    questions = QuestionSynthesizer(chooser=first).synthesize(
        [""], GenerationOptions.from_strategies(["generative"])
    )
    assert questions[0].question_text == "What does the text say about this?"


def test_explicit_generator_overrides_registry():
    class FixedGenerator(BaseQuestionGenerator):
        strategy = StrategyTag.CONTEXTUAL

        def generate(self, sentence, anchor):
            return "Fixed?"

    synthesizer = QuestionSynthesizer(generators={"bert": FixedGenerator()}, chooser=first)
    questions = synthesizer.synthesize(EINSTEIN_CANDIDATES[:1])

    assert [q.question_text for q in questions] == [
        "Who albert?",
        "Fixed?",
        "What does the text say about Albert?",
    ]


def test_reused_synthesizer_repeats_output():
    synthesizer = QuestionSynthesizer(seed=3)

    runs = [synthesizer.synthesize(EINSTEIN_CANDIDATES) for _ in range(6)]

    assert all(run == runs[0] for run in runs)


@pytest.mark.parametrize("strategy", list(StrategyTag))
def test_strategy_isolation_on_reused_synthesizer(strategy):
    synthesizer = QuestionSynthesizer(seed=3)
    everything = synthesizer.synthesize(EINSTEIN_CANDIDATES)

    reduced = synthesizer.synthesize(
        EINSTEIN_CANDIDATES, GenerationOptions(**{strategy.value: False})
    )

    assert reduced == [q for q in everything if q.strategy is not strategy]


def test_explicit_generator_is_reused():
    generator = TemplateQuestionGenerator(chooser=first)
    synthesizer = QuestionSynthesizer(generators={"template": generator})

    assert synthesizer.generator_for(StrategyTag.TEMPLATE) is generator
    assert synthesizer.generator_for(StrategyTag.TEMPLATE) is generator
    assert "template" in repr(synthesizer)
