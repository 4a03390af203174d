"""Tests for vocabulary-driven skill extraction."""

from models.schemas import SkillCategory, SkillDefinition
from services.skill_extractor import build_candidates, extract_skills, resolve_skill_inputs


def test_extract_finds_label_and_alias(vocabulary):
    skills = extract_skills("Shipped a Docker image and used version control daily", vocabulary)
    assert skills == ["git", "docker"]


def test_javascript_and_java_both_found_longest_first():
    vocab = [
        SkillDefinition(id="js", display_label="JavaScript", aliases=("ecmascript",), category="language"),
        SkillDefinition(id="java", display_label="Java", category="language"),
    ]
    assert extract_skills("Proficient in Java and JavaScript development.", vocab) == ["js", "java"]


def test_javascript_alone_is_not_java(vocabulary):
    skills = extract_skills("Proficient in JavaScript and TypeScript", vocabulary)
    assert "js" in skills
    assert "java" not in skills


def test_java_alone_is_only_java(vocabulary):
    assert extract_skills("Ten years of Java on the backend", vocabulary) == ["java"]


def test_single_letter_does_not_match_inside_words(vocabulary):
    # "c" must not match inside "react" or "docker"
    skills = extract_skills("React and Docker", vocabulary)
    assert "c" not in skills
    assert skills == ["docker", "react"]


def test_symbol_patterns_are_escaped_and_bounded(vocabulary):
    skills = extract_skills("Wrote C++ services and C# tooling.", vocabulary)
    assert "cpp" in skills
    assert "csharp" in skills


def test_regex_metacharacters_in_alias_do_not_crash():
    vocab = [
        SkillDefinition(id="weird", display_label="a(b", aliases=("[x]*", "?+", "\\d"), category="tool"),
    ]
    assert extract_skills("nothing to see here", vocab) == []
    assert extract_skills("we use [x]* daily", vocab) == ["weird"]


def test_case_insensitive(vocabulary):
    assert extract_skills("JAVASCRIPT", vocabulary) == ["js"]
    assert extract_skills("ecmaScript", vocabulary) == ["js"]


def test_empty_and_whitespace_text(vocabulary):
    assert extract_skills("", vocabulary) == []
    assert extract_skills("   ", vocabulary) == []
    assert extract_skills("\n\t", vocabulary) == []


def test_no_matches_is_empty(vocabulary):
    assert extract_skills("Enjoys hiking and cooking", vocabulary) == []


def test_each_id_reported_once(vocabulary):
    text = "React, ReactJS and more React. Git, git, version control."
    skills = extract_skills(text, vocabulary)
    assert len(skills) == len(set(skills))
    assert set(skills) == {"react", "git"}


def test_output_is_deterministic(vocabulary):
    text = "Teamwork, Git, Docker, React, JavaScript, Java, C++"
    first = extract_skills(text, vocabulary)
    assert extract_skills(text, vocabulary) == first
    assert extract_skills(text, list(vocabulary)) == first


def test_blank_patterns_are_skipped():
    vocab = [
        SkillDefinition(id="python", display_label="Python", aliases=("", "   "), category="language"),
    ]
    candidates = build_candidates(vocab)
    assert all(pattern for pattern, _ in candidates)
    assert extract_skills("plain words", vocab) == []


class TestBuildCandidates:
    def test_id_added_only_when_different_from_label(self):
        vocab = [
            SkillDefinition(id="python", display_label="Python", category="language"),
            SkillDefinition(id="js", display_label="JavaScript", category="language"),
        ]
        patterns = [p for p, _ in build_candidates(vocab)]
        assert patterns.count("python") == 1
        assert "js" in patterns

    def test_sorted_longest_first(self, vocabulary):
        lengths = [len(p) for p, _ in build_candidates(vocabulary)]
        assert lengths == sorted(lengths, reverse=True)

    def test_equal_length_keeps_vocabulary_order(self):
        vocab = [
            SkillDefinition(id="abcd", display_label="ABCD", category=SkillCategory.TOOL),
            SkillDefinition(id="wxyz", display_label="WXYZ", category=SkillCategory.TOOL),
        ]
        assert build_candidates(vocab) == [("abcd", "abcd"), ("wxyz", "wxyz")]

    def test_shared_alias_goes_to_first_declared_skill(self):
        vocab = [
            SkillDefinition(id="first", display_label="First", aliases=("shared",), category=SkillCategory.TOOL),
            SkillDefinition(id="second", display_label="Second", aliases=("shared",), category=SkillCategory.TOOL),
        ]
        # Both ids appear because each claims "shared"; the first declared is recorded first
        assert extract_skills("shared", vocab) == ["first", "second"]


class TestResolveSkillInputs:
    def test_resolves_ids_labels_and_aliases(self, vocabulary):
        assert resolve_skill_inputs(["js", "React", " version control "], vocabulary) == ["js", "react", "git"]

    def test_drops_unknown_and_duplicates(self, vocabulary):
        assert resolve_skill_inputs(["JavaScript", "ecmascript", "cobol", ""], vocabulary) == ["js"]

    def test_no_substring_matching(self, vocabulary):
        assert resolve_skill_inputs(["reactive programming"], vocabulary) == []

    def test_id_outranks_other_skills_alias(self):
        vocab = [
            SkillDefinition(id="golang", display_label="Go", aliases=("go-lang", "node"), category="language"),
            SkillDefinition(id="node", display_label="Node.js", category="framework"),
        ]
        assert resolve_skill_inputs(["node"], vocab) == ["node"]
