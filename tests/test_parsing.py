"""
Unit tests for best-effort parsing of model output.
"""

import json

import pytest

from app.modules.analysis.parsing import parse_flashcards, parse_quiz_questions


class TestParseFlashcards:
    def test_valid_payload(self):
        text = json.dumps(
            {
                "flashcards": [
                    {"front": "What is ATP?", "back": "The energy currency of the cell."},
                    {"front": "What is ATP?", "back": "The energy currency of the cell."},
                ]
            }
        )

        cards = parse_flashcards(text)

        # Duplicates are kept
        assert len(cards) == 2
        assert cards[0].front == "What is ATP?"
        assert cards[1].back == "The energy currency of the cell."

    def test_code_fenced_payload(self):
        text = '```json\n{"flashcards": [{"front": "F", "back": "B"}]}\n```'

        cards = parse_flashcards(text)

        assert [(c.front, c.back) for c in cards] == [("F", "B")]

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "not json at all",
            "[]",
            '{"cards": []}',
            '{"flashcards": "nope"}',
            '{"flashcards": [{"front": "only a front"}]}',
        ],
    )
    def test_unusable_payload_is_empty(self, text):
        assert parse_flashcards(text) == []


class TestParseQuizQuestions:
    def test_valid_payload(self):
        text = json.dumps(
            {
                "questions": [
                    {
                        "question": "Where does photosynthesis happen?",
                        "options": ["Mitochondria", "Chloroplast", "Nucleus", "Ribosome"],
                        "correctAnswer": 1,
                    }
                ]
            }
        )

        questions = parse_quiz_questions(text)

        assert len(questions) == 1
        assert questions[0].options[1] == "Chloroplast"
        assert questions[0].correct_answer == 1

    def test_options_normalized_to_four(self):
        text = json.dumps(
            {
                "questions": [
                    {"question": "Short?", "options": ["Yes", "No"], "correctAnswer": 1},
                    {
                        "question": "Long?",
                        "options": ["A", "B", "C", "D", "E"],
                        "correctAnswer": 2,
                    },
                ]
            }
        )

        questions = parse_quiz_questions(text)

        assert questions[0].options == ["Yes", "No", "Option 3", "Option 4"]
        assert questions[0].correct_answer == 1
        assert questions[1].options == ["A", "B", "C", "D"]

    def test_out_of_range_answer_drops_question(self):
        text = json.dumps(
            {"questions": [{"question": "Q?", "options": ["A", "B", "C", "D"], "correctAnswer": 7}]}
        )

        assert parse_quiz_questions(text) == []

    def test_blank_option_keeps_answer_on_same_text(self):
        text = json.dumps(
            {
                "questions": [
                    {
                        "question": "Which is right?",
                        "options": ["", "Right", "Wrong1", "Wrong2"],
                        "correctAnswer": 1,
                    }
                ]
            }
        )

        q = parse_quiz_questions(text)[0]

        assert q.options == ["Right", "Wrong1", "Wrong2", "Option 4"]
        assert q.options[q.correct_answer] == "Right"

    def test_answer_trimmed_away_drops_question(self):
        text = json.dumps(
            {
                "questions": [
                    {
                        "question": "Fifth is right?",
                        "options": ["a", "b", "c", "d", "Right"],
                        "correctAnswer": 4,
                    },
                    {
                        "question": "Kept?",
                        "options": ["a", "", "b", "c", "Right", "e"],
                        "correctAnswer": 4,
                    },
                ]
            }
        )

        questions = parse_quiz_questions(text)

        assert [q.question for q in questions] == ["Kept?"]
        assert questions[0].options == ["a", "b", "c", "Right"]
        assert questions[0].correct_answer == 3

    def test_question_without_options_is_skipped(self):
        text = json.dumps(
            {
                "questions": [
                    {"question": "No options?", "options": [], "correctAnswer": 0},
                    {"question": "Kept?", "options": ["A", "B", "C", "D"], "correctAnswer": 3},
                ]
            }
        )

        questions = parse_quiz_questions(text)

        assert [q.question for q in questions] == ["Kept?"]

    @pytest.mark.parametrize(
        "text",
        [None, "{", '{"questions": null}', '{"questions": [{"options": ["A"]}]}'],
    )
    def test_unusable_payload_is_empty(self, text):
        assert parse_quiz_questions(text) == []
