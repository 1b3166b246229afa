"""
Unit tests for the non-interactive defaults.
"""

import pytest

from kickstart.config.defaults import build_answers_from_options, framework_defaults
from kickstart.wizard.answers import AnswerField, answers_to_dict


class TestFrameworkDefaults:
    def test_vite(self):
        answers = framework_defaults("vite")
        assert answers[AnswerField.ROUTING] == "none"
        assert AnswerField.NEXT_ROUTING not in answers

    def test_nextjs(self):
        answers = framework_defaults("nextjs")
        assert answers[AnswerField.NEXT_ROUTING] == "app"
        assert AnswerField.ROUTING not in answers


class TestBuildAnswersFromOptions:
    def test_all_defaults(self):
        answers = answers_to_dict(build_answers_from_options())

        assert answers == {
            "package_manager": "npm",
            "framework": "vite",
            "routing": "none",
            "typescript": False,
            "linting": True,
            "styling": "tailwind",
            "state_management": "none",
            "api": "none",
            "testing": "none",
            "init_git": True,
            "deployment": "none",
            "open_editor": False,
            "editor": "vscode",
            "auto_start": True,
        }

    def test_explicit_options_win(self):
        answers = build_answers_from_options(
            "nextjs",
            typescript=True,
            styling="css",
            state="redux",
            api="axios-only",
            testing="jest",
            next_routing="pages",
            package_manager="yarn",
            linting=False,
            git=False,
            autostart=False,
        )

        assert answers[AnswerField.FRAMEWORK] == "nextjs"
        assert answers[AnswerField.NEXT_ROUTING] == "pages"
        assert answers[AnswerField.TYPESCRIPT] is True
        assert answers[AnswerField.STYLING] == "css"
        assert answers[AnswerField.STATE_MANAGEMENT] == "redux"
        assert answers[AnswerField.API] == "axios-only"
        assert answers[AnswerField.TESTING] == "jest"
        assert answers[AnswerField.PACKAGE_MANAGER] == "yarn"
        assert answers[AnswerField.LINTING] is False
        assert answers[AnswerField.INIT_GIT] is False
        assert answers[AnswerField.AUTO_START] is False
        assert answers[AnswerField.OPEN_EDITOR] is False

    def test_routing_option_ignored_for_nextjs(self):
        answers = build_answers_from_options("nextjs", routing="react-router")
        assert AnswerField.ROUTING not in answers

    def test_unsupported_framework(self):
        with pytest.raises(ValueError, match="Unsupported framework"):
            build_answers_from_options("angular")
