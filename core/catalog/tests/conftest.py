"""Pytest fixtures for catalog tests."""

import pytest

from core.catalog import Course, Section, Topic


def make_topic(topic_id: str, **payload) -> Topic:
    return Topic(
        id=topic_id,
        title=f"Title {topic_id}",
        description=f"About {topic_id}",
        payload=payload,
    )


@pytest.fixture
def small_tree():
    """courses [A: [S1: [t1, t2]], B: [S2: [t3]]]"""
    return {
        "A": Course(
            key="A",
            title="Course A",
            sections={"S1": Section(key="S1", title="Section 1", topics=(make_topic("t1"), make_topic("t2")))},
        ),
        "B": Course(
            key="B",
            title="Course B",
            sections={"S2": Section(key="S2", title="Section 2", topics=(make_topic("t3"),))},
        ),
    }


@pytest.fixture
def course_tree():
    """Two courses, several sections, declared in non-alphabetical order."""
    return {
        "mysql": Course(
            key="mysql",
            title="MySQL",
            icon="🐬",
            color="#00758F",
            sections={
                "basics": Section(
                    key="basics",
                    title="Introduction & Setup",
                    topics=(
                        make_topic("mysql-introduction", content="# MySQL"),
                        make_topic("mysql-data-types", code="INT"),
                    ),
                ),
                "dql": Section(
                    key="dql",
                    title="DQL",
                    topics=(make_topic("mysql-select"),),
                ),
                "empty": Section(key="empty", title="Coming Soon", topics=()),
                "advanced": Section(
                    key="advanced",
                    title="Advanced Features",
                    topics=(make_topic("mysql-subqueries"),),
                ),
            },
        ),
        "git": Course(
            key="git",
            title="Git & GitHub",
            sections={
                "basics": Section(
                    key="basics",
                    title="Git Basics",
                    topics=(
                        make_topic("git-introduction"),
                        make_topic("git-basics", practiceQuestions=[{"question": "?"}]),
                    ),
                ),
            },
        ),
    }
