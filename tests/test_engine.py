"""
Moderation Engine Tests

Tokenizing, matching, frequency counting, reports, statistics and
reviewer feedback.
"""

import logging

from moderator.engine import ModerationEngine


class TestLoadBannedWords:

    def test_words_are_normalized(self, data_dir, words_file):
        eng = ModerationEngine(data_dir)
        assert eng.load_banned_words(words_file) is True
        for word in ("scam", "fraud", "hate", "badword"):
            assert eng.is_banned(word)
        assert not eng.is_banned("Scam")
        assert not eng.is_banned("")
        assert len(eng.trie) == 4

    def test_missing_file_is_not_fatal(self, engine, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="moderator"):
            ok = engine.load_banned_words(str(tmp_path / "missing.txt"))
        assert ok is False
        assert "missing.txt" in caplog.text
        assert engine.is_banned("scam")

    def test_empty_engine_flags_nothing(self, data_dir, tmp_path):
        eng = ModerationEngine(data_dir)
        eng.load_banned_words(str(tmp_path / "missing.txt"))
        assert eng.flag_content("scam fraud hate") is False


class TestMatching:

    def test_scam_example(self, engine):
        engine.frequency["scam"] = 3
        report = engine.analyze("This is a SCAM!!")
        assert report.flagged is True
        assert report.terms == ["scam"]
        assert engine.frequency["scam"] == 4
        assert report.matches[0].frequency == 4

    def test_clean_text_changes_nothing(self, engine):
        engine.analyze("hate it")
        before = dict(engine.frequency)
        report = engine.analyze("hello world")
        assert report.flagged is False
        assert report.matches == []
        assert engine.frequency == before
        assert engine.flagged_count == 1

    def test_matches_in_order_with_repeats(self, engine):
        matched = engine.tokenize_and_match("Fraud, scam... and more FRAUD?")
        assert matched == ["fraud", "scam", "fraud"]
        assert engine.frequency == {"fraud": 2, "scam": 1}

    def test_punctuation_inside_token_is_stripped(self, engine):
        assert engine.tokenize_and_match("s-c-a-m 'abuse'") == ["scam", "abuse"]

    def test_substring_does_not_match(self, engine):
        assert engine.tokenize_and_match("scammer hateful") == []

    def test_punctuation_only_tokens(self, engine):
        assert engine.tokenize_and_match("!!! ... ???") == []

    def test_tokenize(self):
        assert ModerationEngine.tokenize("  Hello,\tWORLD!\n") == ["hello", "world"]

    def test_flag_content_logs_entry(self, engine):
        assert engine.flag_content("pure hate") is True
        assert engine.flag_content("nothing here") is False
        entry = engine.last_flagged()
        assert entry.text == "pure hate"
        assert entry.words == ["hate"]
        assert engine.flagged_count == 1


class TestAnalyzeReport:

    def test_related_terms_included(self, engine):
        report = engine.analyze("That was abuse")
        match = report.matches[0]
        assert match.term == "abuse"
        assert match.related == ["violence", "bullying"]

    def test_frequency_is_cumulative(self, engine):
        engine.analyze("scam")
        report = engine.analyze("scam scam")
        assert [m.frequency for m in report.matches] == [3, 3]

    def test_relationship_terms_are_not_normalized(self, engine):
        engine.add_banned_word("spam")
        engine.add_term_relationship("Spam", "junk")
        report = engine.analyze("spam")
        assert report.matches[0].related == []
        assert engine.graph.related_terms("Spam") == ["junk"]

    def test_max_depth_is_configurable(self, data_dir):
        eng = ModerationEngine(data_dir, max_depth=1)
        eng.add_banned_word("a")
        eng.add_term_relationship("a", "b")
        eng.add_term_relationship("b", "c")
        assert eng.analyze("a").matches[0].related == ["b"]


class TestAddBannedWord:

    def test_new_word_matches_immediately(self, engine):
        assert engine.flag_content("phishing attempt") is False
        assert engine.add_banned_word("  Phishing ") is True
        assert engine.flag_content("phishing attempt") is True

    def test_empty_word_rejected(self, engine):
        assert engine.add_banned_word("   ") is False
        assert not engine.is_banned("")


class TestStatistics:

    def test_top_terms_of_seven(self, engine):
        engine.frequency = {
            "a": 1, "b": 7, "c": 3, "d": 5, "e": 2, "f": 6, "g": 4,
        }
        assert engine.top_flagged_terms(5) == [
            ("b", 7), ("f", 6), ("d", 5), ("g", 4), ("c", 3),
        ]

    def test_ties_broken_by_term(self, engine):
        engine.frequency = {"scam": 2, "fraud": 2, "hate": 1}
        assert engine.top_flagged_terms(2) == [("fraud", 2), ("scam", 2)]

    def test_limit_bounds(self, engine):
        engine.frequency = {"scam": 1}
        assert engine.top_flagged_terms() == [("scam", 1)]
        assert engine.top_flagged_terms(0) == []
        assert engine.top_flagged_terms(-1) == []

    def test_describe_term_graph(self, engine):
        engine.analyze("scam and spam")
        engine.add_banned_word("spam")
        engine.analyze("spam")
        assert engine.describe_term_graph() == [
            "Connections for 'scam':\nscam -> fraud",
            "No connections found for word: spam",
        ]


class TestFeedback:

    def test_no_flagged_content(self, engine):
        assert engine.record_feedback(True) is None
        assert engine.feedback == []

    def test_feedback_attaches_to_latest(self, engine):
        engine.analyze("scam")
        engine.analyze("fraud here")
        engine.analyze("clean text")
        entry = engine.record_feedback(False)
        assert entry.text == "fraud here"
        assert engine.feedback == [("fraud here", False)]


class TestEmptyRelationshipTerms:

    def test_empty_term_rejected(self, engine):
        before = engine.graph.serialize()
        assert engine.add_term_relationship("", "scam") is False
        assert engine.add_term_relationship("scam", "") is False
        assert engine.graph.serialize() == before
        assert "" not in engine.graph

    def test_valid_relationship_accepted(self, engine):
        assert engine.add_term_relationship("spam", "junk") is True
        assert engine.graph.neighbors("junk") == ["spam"]


class TestAddBannedWordNormalization:

    def test_inner_whitespace_removed(self, engine):
        assert engine.add_banned_word("bad  word") is True
        assert engine.is_banned("badword")
        assert not engine.is_banned("bad word")
        assert engine.tokenize_and_match("BADWORD!") == ["badword"]
