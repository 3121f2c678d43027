"""Pytest fixtures for web API tests.

Builds the app around an in-memory course tree so that API tests run
without reading the course structure file.
"""

import pytest
from fastapi.testclient import TestClient

from core.catalog import Course, Section, Topic
from core.content import CatalogStore
from main import create_app


def api_course_tree():
    """Course tree covering the cases the API tests exercise:

    - topic -> topic within a section (java-introduction -> java-features)
    - section boundary (java-features -> java-if-else)
    - course boundary (java-if-else -> git-introduction)
    - end of catalog (git-basics)
    """
    return {
        "corejava": Course(
            key="corejava",
            title="Core Java",
            icon="☕",
            color="#f89820",
            sections={
                "basics": Section(
                    key="basics",
                    title="Java Basics",
                    topics=(
                        Topic(
                            id="java-introduction",
                            title="Java Introduction",
                            description="What Java is and why it matters",
                            payload={
                                "content": "# Java Introduction",
                                "code": 'System.out.println("Hello");',
                            },
                        ),
                        Topic(
                            id="java-features",
                            title="Java Features",
                            description="Platform independence, OOP, security",
                        ),
                    ),
                ),
                "controlflow": Section(
                    key="controlflow",
                    title="Control Flow Statements",
                    topics=(
                        Topic(
                            id="java-if-else",
                            title="If-Else",
                            description="Conditional branching",
                        ),
                    ),
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
                        Topic(
                            id="git-introduction",
                            title="Introduction to Git",
                            description="Version control basics",
                        ),
                        Topic(
                            id="git-basics",
                            title="Git Basics - First Repository",
                            description="init, add, commit",
                            payload={
                                "practiceQuestions": [
                                    {"question": "Which command stages files?", "answer": "git add"}
                                ],
                                "courseTitle": "Stale Title",
                            },
                        ),
                    ),
                ),
            },
        ),
    }


@pytest.fixture
def store():
    store = CatalogStore(api_course_tree)
    store.refresh()
    return store


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
