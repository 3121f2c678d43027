"""Tests for flattening the course tree."""

from core.catalog import Course, Section, Topic, count_topics, flatten


def test_flatten_small_tree_order(small_tree):
    entries = flatten(small_tree)
    assert [e.id for e in entries] == ["t1", "t2", "t3"]


def test_flatten_length_matches_topic_count(course_tree):
    entries = flatten(course_tree)
    assert len(entries) == count_topics(course_tree) == 6


def test_flatten_keeps_declaration_order_not_alphabetical(course_tree):
    """mysql is declared before git, and dql before advanced."""
    entries = flatten(course_tree)
    assert [e.id for e in entries] == [
        "mysql-introduction",
        "mysql-data-types",
        "mysql-select",
        "mysql-subqueries",
        "git-introduction",
        "git-basics",
    ]


def test_flatten_attaches_ancestry(course_tree):
    entries = flatten(course_tree)
    select = entries[2]
    assert select.id == "mysql-select"
    assert select.course_key == "mysql"
    assert select.course_title == "MySQL"
    assert select.section_key == "dql"
    assert select.section_title == "DQL"

    git_basics = entries[-1]
    assert git_basics.course_key == "git"
    assert git_basics.section_key == "basics"
    assert git_basics.section_title == "Git Basics"


def test_flatten_carries_topic_fields_and_payload(course_tree):
    entries = flatten(course_tree)
    intro = entries[0]
    assert intro.title == "Title mysql-introduction"
    assert intro.description == "About mysql-introduction"
    assert intro.payload == {"content": "# MySQL"}
    assert entries[-1].payload["practiceQuestions"] == [{"question": "?"}]


def test_flatten_skips_empty_sections(course_tree):
    entries = flatten(course_tree)
    assert all(e.section_key != "empty" for e in entries)


def test_flatten_empty_tree():
    assert flatten({}) == []
    assert count_topics({}) == 0


def test_flatten_course_without_sections():
    courses = {"spring": Course(key="spring", title="Spring")}
    assert flatten(courses) == []


def test_flatten_passes_through_sparse_topics():
    """Topics without title/description are not rejected."""
    courses = {
        "c": Course(
            key="c",
            title="C",
            sections={"s": Section(key="s", title="S", topics=(Topic(id="bare", title=""),))},
        )
    }
    [entry] = flatten(courses)
    assert entry.id == "bare"
    assert entry.title == ""
    assert entry.description == ""
    assert entry.payload == {}


def test_flatten_is_repeatable(course_tree):
    assert flatten(course_tree) == flatten(course_tree)
