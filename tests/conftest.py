"""Shared pytest fixtures for ntcodec tests."""

import pytest


WEBSITE_EXAMPLE = """\
default repository: home
report style: tree
compact format: {repo}: {size:{fmt}}.  Last back up: {last_create:ddd, MMM DD}.
normal format: {host:<8} {user:<5} {config:<9} {size:<8.2b} {last_create:ddd, MMM DD}
date format: D MMMM YYYY
size format: .2b

repositories:
    # only the composite repositories need be included
    home:
        children: rsync borgbase
    caches:
        children: cache cache@media cache@files
    servers:
        children:
            - root@dev~root
            - root@mail~root
            - root@media~root
            - root@web~root
    all:
        children: home caches servers"""

WEBSITE_EXPECTED = {
    "default repository": "home",
    "report style": "tree",
    "compact format": "{repo}: {size:{fmt}}.  Last back up: {last_create:ddd, MMM DD}.",
    "normal format": "{host:<8} {user:<5} {config:<9} {size:<8.2b} {last_create:ddd, MMM DD}",
    "date format": "D MMMM YYYY",
    "size format": ".2b",
    "repositories": {
        "home": {"children": "rsync borgbase"},
        "caches": {"children": "cache cache@media cache@files"},
        "servers": {
            "children": [
                "root@dev~root",
                "root@mail~root",
                "root@media~root",
                "root@web~root",
            ]
        },
        "all": {"children": "home caches servers"},
    },
}


@pytest.fixture
def website_example():
    """Configuration document from the NestedText website."""
    return WEBSITE_EXAMPLE, WEBSITE_EXPECTED


@pytest.fixture
def sample_tree():
    """A tree exercising every block form the serializer can choose."""
    return {
        "name": "Katheryn McDaniel",
        "address": "138 Almond Street\nTopeka, Kansas 20697",
        "phone": {"cell": "1-210-555-5297", "home": "1-210-555-8470"},
        "email": "KateMcD@aol.com",
        "additional roles": ["board member"],
        "": "empty key",
        "key: with colon": ["", "x\ny", {}],
        "[bracketed": [],
        "notes": "",
    }
