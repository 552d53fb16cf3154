import dataclasses

import pytest

from qperf_ui.domain.models import QUESTION_TYPES, RunOptions, RunRequest


def test_default_options_include_every_question_type():
    opts = RunOptions()
    assert opts.delimiter == ","
    assert opts.tournament_label == ""
    assert opts.display_individual_rounds is False
    assert opts.question_type_flags == (True,) * len(QUESTION_TYPES)


def test_blank_delimiter_falls_back_to_comma():
    assert RunOptions(delimiter="").normalized().delimiter == ","


@pytest.mark.parametrize("raw", [";", "\t", "|"])
def test_explicit_delimiter_is_kept(raw):
    assert RunOptions(delimiter=raw).normalized().delimiter == raw


def test_missing_flags_default_to_true():
    opts = RunOptions(question_type_flags=(False, False)).normalized()
    assert opts.question_type_flags[:2] == (False, False)
    assert all(opts.question_type_flags[2:])
    assert len(opts.question_type_flags) == len(QUESTION_TYPES)


def test_request_keeps_selection_order_and_duplicates():
    req = RunRequest.build(["b.rtf", "a.rtf", "b.rtf"], ["log.csv"], RunOptions())
    assert req.question_paths == ("b.rtf", "a.rtf", "b.rtf")
    assert req.log_paths == ("log.csv",)


def test_request_is_immutable():
    req = RunRequest.build(["q.rtf"], ["l.csv"], RunOptions())
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.delimiter = ";"


def test_question_type_codes_follow_flags():
    flags = (True, False, True, False, False, False, False, False, True)
    req = RunRequest.build(["q.rtf"], ["l.csv"], RunOptions(question_type_flags=flags))
    assert req.question_type_codes() == "AIM"
    assert RunRequest.build(["q.rtf"], ["l.csv"], RunOptions()).question_type_codes() == "AGIQRSXVM"
