import pytest

from transcript_processor.terms import correct_terms, extract_slide_terms, phonetic_variations


class TestCorrectTerms:
    def test_polymorphism_with_slide_context(self):
        result = correct_terms(
            "The polly morphism concept allows different implementations",
            "Polymorphism in Object-Oriented Programming",
        )
        assert "polymorphism" in result

    def test_common_mishearing(self):
        result = correct_terms("We use the sequel database for storage", "SQL Database Design")
        assert "SQL" in result

    def test_multiple_terms_in_one_pass(self):
        result = correct_terms(
            "The Jason data is parsed using the A.P.I. endpoint",
            "JSON API Integration",
        )
        assert result == "The JSON data is parsed using the API endpoint"

    def test_no_slide_context_leaves_plain_text(self):
        text = "This is the original text"
        assert correct_terms(text, None) == text

    def test_empty_text(self):
        assert correct_terms("", "Anything") == ""

    def test_case_insensitive_dictionary(self):
        result = correct_terms("the GIT version control system", "Git Branching Strategies")
        assert result == "the Git version control system"

    def test_kubernetes_pronunciation(self):
        result = correct_terms(
            "We deploy using Cooper Netties orchestration",
            "Kubernetes Container Orchestration",
        )
        assert "Kubernetes" in result


class TestAcronyms:
    def test_spaced_letters(self):
        assert correct_terms("the a p i returns jason") == "the API returns JSON"

    def test_https_is_not_downgraded(self):
        result = correct_terms("Always use https and not h.t.t.p for requests")
        assert result == "Always use HTTPS and not HTTP for requests"

    def test_dotted_letters_must_be_adjacent(self):
        assert correct_terms("Let U. I think") == "Let U. I think"

    def test_sentence_final_dot_kept(self):
        assert correct_terms("We call the A.P.I.") == "We call the API."


class TestSlideContext:
    def test_split_word_uses_slide_casing(self):
        result = correct_terms("we deploy with kuber netes today", "Kubernetes")
        assert result == "we deploy with Kubernetes today"

    def test_phonetic_substitution(self):
        assert correct_terms("fonetics is fun", "Phonetics") == "Phonetics is fun"

    def test_unmatched_candidates_leave_text(self):
        text = "nothing here resembles the slide"
        assert correct_terms(text, "Quaternions") == text


class TestSlideTerms:
    def test_extracts_words_and_runs(self):
        terms = extract_slide_terms("Object Oriented Programming in SQL")
        assert terms == ["Object", "Oriented", "Programming", "SQL", "Object Oriented Programming"]

    @pytest.mark.parametrize("slide_text", [None, ""])
    def test_no_slide_text(self, slide_text):
        assert extract_slide_terms(slide_text) == []


class TestPhoneticVariations:
    def test_first_entry_is_term(self):
        assert phonetic_variations("Polymorphism")[0] == "polymorphism"

    def test_substitutions_and_splits(self):
        variations = phonetic_variations("polymorphism")
        assert "polymorfism" in variations
        assert "poly morphism" in variations
        assert "polymorp hism" in variations
        assert "polymorph ism" not in variations

    def test_split_positions(self):
        variations = phonetic_variations("kubernetes")
        assert "cubernetes" in variations
        assert [v for v in variations if " " in v] == ["kube rnetes", "kuber netes", "kubern etes"]

    def test_short_terms_are_not_split(self):
        assert phonetic_variations("Database") == ["database"]
