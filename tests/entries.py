# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Sample models and transformers shared by the test modules."""

from dataclasses import dataclass, field

from flux.transformer import Collection, Item, Transformer


@dataclass
class Author:
    id: int
    name: str
    email: str
    company: str = "Flipbox"


@dataclass
class Entry:
    id: int
    title: str
    body: str
    author: Author
    tags: list[str] = field(default_factory=list)


ALICE = Author(id=1, name="Alice", email="alice@example.com")
BOB = Author(id=2, name="Bob", email="bob@example.com", company="Acme")

ENTRIES = [
    Entry(id=10, title="Hello", body="First post", author=ALICE, tags=["news"]),
    Entry(id=11, title="Again", body="Second post", author=BOB, tags=["news", "misc"]),
    Entry(id=12, title="Last", body="Third post", author=ALICE),
]


class CompanyTransformer(Transformer):
    def transform(self, company):
        return {"name": company}


class AuthorTransformer(Transformer):
    available_includes = ("company",)

    def transform(self, author):
        return {"id": author.id, "name": author.name, "email": author.email}

    def include_company(self, author):
        return Item(author.company, CompanyTransformer)


class EntryTransformer(Transformer):
    available_includes = ("author", "tags")

    def __init__(self, with_body: bool = True):
        self.with_body = with_body

    def transform(self, entry):
        data = {"id": entry.id, "title": entry.title}
        if self.with_body:
            data["body"] = entry.body
        return data

    def include_author(self, entry):
        return Item(entry.author, AuthorTransformer)

    def include_tags(self, entry):
        return Collection(entry.tags, lambda tag: {"name": tag})


class TaggedEntryTransformer(EntryTransformer):
    default_includes = ("tags",)


class NeedsPrefixTransformer(Transformer):
    def __init__(self, prefix: str):
        self.prefix = prefix

    def transform(self, entry):
        return {"title": f"{self.prefix}{entry.title}"}


class StrictTransformer(Transformer):
    def __init__(self, limit: int = 1):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit

    def transform(self, entry):
        return {"id": entry.id, "tags": entry.tags[: self.limit]}
