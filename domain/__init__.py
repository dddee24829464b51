"""Describes the recipe finder domain. Centres around the use cases.

Each use case is an interactor that takes input data, talks to a data access
object and calls exactly one presenter method with the outcome. The
interactors know nothing about HTML or sessions, they only see the protocols
declared next to them.

What is actually hard here?

- Not much. Most of the work is validating strings typed into forms.
- The recipe store is an external collaborator. Locally it is SQLite, remotely
  it is the Edamam API. Both look the same to the search interactor.
"""
