import unittest

from quizgen.prompts import build_question_prompt, SYSTEM_PROMPT


class TestBuildQuestionPrompt(unittest.TestCase):
    def test_includes_system_instruction(self):
        prompt = build_question_prompt(["Mathematics"], 5, [])
        self.assertTrue(prompt.startswith(SYSTEM_PROMPT))
        self.assertIn('"correct_option": "A/B/C/D"', prompt)
        self.assertIn('Do not repeat any questions from the "previous_questions" list', prompt)

    def test_parameters_inserted_verbatim(self):
        prompt = build_question_prompt(["Deep Learning (DL)", "Python Libraries"], 9, [])
        self.assertIn("- Topic(s): Deep Learning (DL), Python Libraries", prompt)
        self.assertIn("- Difficulty Level: 9/10", prompt)

    def test_previous_questions_as_json(self):
        prompt = build_question_prompt(["ML"], 3, ['What is "LoRA"?', "Qué es ML?"])
        self.assertIn('previous_questions: ["What is \\"LoRA\\"?", "Qué es ML?"]', prompt)

    def test_ends_with_raw_json_instruction(self):
        prompt = build_question_prompt(["ML"], 1, [])
        self.assertTrue(prompt.rstrip().endswith("no markdown, no explanations."))


if __name__ == '__main__':
    unittest.main()
