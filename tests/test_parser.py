"""Tests for LLM response parsing."""
from medquiz.llm.parser import parse_question, split_image_description


class TestSplitImageDescription:

    def test_trims_both_parts(self):
        text, description = split_image_description("Explanation body\nIMAGE DESCRIPTION:\n  A diagram of X  ")

        assert text == "Explanation body"
        assert description == "A diagram of X"

    def test_no_marker(self):
        assert split_image_description("  only text \n") == ("only text", None)

    def test_marker_without_content(self):
        assert split_image_description("text\nIMAGE DESCRIPTION:  \n ") == ("text", None)

    def test_splits_on_first_marker_only(self):
        text, description = split_image_description("a IMAGE DESCRIPTION: b IMAGE DESCRIPTION: c")

        assert text == "a"
        assert description == "b IMAGE DESCRIPTION: c"

    def test_marker_is_case_sensitive(self):
        assert split_image_description("text image description: x") == ("text image description: x", None)


class TestParseQuestion:

    def test_plain_json(self):
        raw = '{"question": "Largest organ?", "options": ["Liver", "Skin", "Lung", "Brain"], "correct": "Skin"}'

        q = parse_question(raw, subject="Anatomy", difficulty="Easy")

        assert q.question == "Largest organ?"
        assert q.options == ["Liver", "Skin", "Lung", "Brain"]
        assert q.correct_index == 1
        assert q.correct_option == "Skin"
        assert q.subject == "Anatomy"
        assert q.difficulty == "Easy"

    def test_code_fence(self):
        raw = 'Here you go:\n```json\n{"question": "Q?", "options": ["a1", "b1"], "correct": "b1"}\n```'

        q = parse_question(raw)

        assert q.correct_index == 1

    def test_object_inside_text(self):
        raw = 'Sure! {"question": "Q?", "options": ["x", "y", "z"], "correct": "z"} Hope it helps.'

        assert parse_question(raw).correct_index == 2

    def test_letter_prefixes_and_letter_answer(self):
        raw = '{"question": "Q?", "options": ["A) Insulin", "B) Glucagon", "C) Cortisol"], "correct": "B"}'

        q = parse_question(raw)

        assert q.options == ["Insulin", "Glucagon", "Cortisol"]
        assert q.correct_index == 1

    def test_prefixed_answer_text(self):
        raw = '{"question": "Q?", "options": ["Insulin", "Glucagon"], "correct": "a. insulin"}'

        assert parse_question(raw).correct_index == 0

    def test_integer_answer(self):
        raw = '{"question": "Q?", "options": ["Insulin", "Glucagon"], "correct": 1}'

        assert parse_question(raw).correct_index == 1

    def test_option_starting_with_article_kept(self):
        raw = '{"question": "Q?", "options": ["A virus", "A bacterium"], "correct": "A virus"}'

        q = parse_question(raw)

        assert q.options == ["A virus", "A bacterium"]
        assert q.correct_index == 0

    def test_answer_not_in_options(self):
        raw = '{"question": "Q?", "options": ["x", "y"], "correct": "w"}'

        assert parse_question(raw) is None

    def test_too_few_options(self):
        raw = '{"question": "Q?", "options": ["x"], "correct": "x"}'

        assert parse_question(raw) is None

    def test_missing_question(self):
        raw = '{"options": ["x", "y"], "correct": "x"}'

        assert parse_question(raw) is None

    def test_not_json(self):
        assert parse_question("I cannot help with that.") is None

    def test_empty(self):
        assert parse_question("") is None

    def test_single_letter_option_text_wins_over_position(self):
        raw = '{"question": "Universal donor blood group?", "options": ["O", "B", "A", "AB"], "correct": "A"}'

        q = parse_question(raw)

        assert q.correct_index == 2
        assert q.correct_option == "A"

    def test_single_letter_option_text_case_insensitive(self):
        raw = '{"question": "Q?", "options": ["O", "B", "A", "AB"], "correct": "ab"}'

        assert parse_question(raw).correct_option == "AB"

    def test_letter_answer_when_no_option_matches(self):
        raw = '{"question": "Q?", "options": ["O", "B", "A", "AB"], "correct": "d"}'

        assert parse_question(raw).correct_option == "AB"

    def test_options_not_a_list(self):
        assert parse_question('{"question": "Q?", "options": 4, "correct": "x"}') is None
        assert parse_question('{"question": "Q?", "options": "x, y", "correct": "x"}') is None

    def test_question_not_a_string(self):
        raw = '{"question": ["Q?"], "options": ["x", "y"], "correct": "x"}'

        assert parse_question(raw) is None
