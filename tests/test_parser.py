import pytest

from autofeedback.diagnostics import DiagnosticKind
from autofeedback.parser import parse_annotation, parse_annotation_tokens, tokenize


def _shape(outcome):
    return [(r.name, r.parameters) for r in outcome.requests]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("!=:1", ("!=", "1")),
        ("!=::1:", ("!=", "1")),
        ("", ()),
        (":::", ()),
        ("   ", ()),
        (" != : 1", (" != ", " 1")),
    ],
)
def test_tokenize_drops_only_empty_fragments(text, expected):
    assert tokenize(text) == expected


def test_single_group():
    outcome = parse_annotation("!=:1")
    assert _shape(outcome) == [("different", ("1",))]
    assert outcome.diagnostics == ()


def test_chained_groups_keep_annotation_order(registry):
    outcome = parse_annotation("^:a:!=:2:<>:a:m:==:b", registry)

    assert _shape(outcome) == [
        ("starts_with", ("a",)),
        ("different", ("2",)),
        ("between", ("a", "m")),
        ("equal", ("b",)),
    ]


@pytest.mark.parametrize("text", ["foo:2", "1:!=:1", "foo", " !=:1"])
def test_unrecognized_leading_token_aborts(text):
    outcome = parse_annotation(text)

    assert outcome.requests == ()
    assert outcome.aborted
    assert [d.kind for d in outcome.diagnostics] == [DiagnosticKind.UNRECOGNIZED_LEADING_TOKEN]
    assert outcome.diagnostics[0].token == tokenize(text)[0]


@pytest.mark.parametrize("text", ["", ":", "::", "   ", " : \t "])
def test_empty_annotation_aborts_without_a_token(text):
    outcome = parse_annotation(text)

    assert outcome.requests == ()
    assert outcome.aborted
    assert outcome.diagnostics[0].token is None


def test_too_many_parameters_drops_the_only_group():
    outcome = parse_annotation("!=:1:2")

    assert outcome.requests == ()
    assert not outcome.aborted
    (diag,) = outcome.diagnostics
    assert diag.kind == DiagnosticKind.ARITY_MISMATCH
    assert (diag.validator, diag.operator, diag.expected, diag.actual) == ("different", "!=", 1, 2)


def test_trailing_group_with_extra_parameters_is_dropped():
    outcome = parse_annotation("!=:1:!=:2:3")

    assert _shape(outcome) == [("different", ("1",))]
    (diag,) = outcome.diagnostics
    assert diag.kind == DiagnosticKind.ARITY_MISMATCH
    assert (diag.expected, diag.actual) == (1, 2)


def test_trailing_group_missing_parameters_is_dropped():
    outcome = parse_annotation("!=:1:!=:")

    assert _shape(outcome) == [("different", ("1",))]
    (diag,) = outcome.diagnostics
    assert (diag.expected, diag.actual) == (1, 0)


def test_malformed_middle_group_does_not_block_later_groups():
    outcome = parse_annotation("!=:1:2:==:x")

    assert _shape(outcome) == [("equal", ("x",))]
    assert [d.kind for d in outcome.diagnostics] == [DiagnosticKind.ARITY_MISMATCH]


def test_consecutive_operators_are_valid_for_zero_arity():
    outcome = parse_annotation("?:?:!=:1")

    assert _shape(outcome) == [("not_empty", ()), ("not_empty", ()), ("different", ("1",))]
    assert outcome.diagnostics == ()


def test_consecutive_operators_drop_group_needing_parameters():
    outcome = parse_annotation("!=:?")

    assert _shape(outcome) == [("not_empty", ())]
    assert outcome.diagnostics[0].validator == "different"


def test_every_emitted_request_satisfies_arity(registry):
    outcome = parse_annotation("<>:a:!=:<>:a:b:c:?:x:==:1:^", registry)

    assert outcome.requests
    for request in outcome.requests:
        assert len(request.parameters) == request.descriptor.arity


def test_numeric_looking_parameters_stay_strings():
    outcome = parse_annotation("!=:10")
    assert outcome.requests[0].parameters == ("10",)


def test_parsing_is_repeatable():
    tokens = ["!=", "1", "!=", "2"]

    first = parse_annotation_tokens(tokens)
    second = parse_annotation_tokens(tokens)

    assert first == second
    assert tokens == ["!=", "1", "!=", "2"]
