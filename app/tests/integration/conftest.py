"""
Root-level conftest.py for integration tests.

Builds translation files on disk so tests exercise loading, chaining,
memoization and localization together.
"""

import pytest


@pytest.fixture
def locales_dir(tmp_path):
    """Write a small translation tree in YAML and Python files.

    Returns a directory structure like:
    - en.yml (with !ref symbolic references)
    - fr.yml
    - overrides.py
    """
    (tmp_path / "en.yml").write_text(
        """\
en:
  app:
    name: Polyglot
    title: !ref app.name
    welcome: "Welcome to %{app}, %{name}!"
  inbox:
    zero: Your inbox is empty
    one: You have one message
    other: "You have %{count} messages"
  date:
    formats:
      default: "%Y-%m-%d"
      long: "%A %d %B %Y"
    day_names: [Sunday, Monday, Tuesday, Wednesday, Thursday, Friday, Saturday]
    abbr_day_names: [Sun, Mon, Tue, Wed, Thu, Fri, Sat]
    month_names: [~, January, February, March, April, May, June, July, August, September, October, November, December]
    abbr_month_names: [~, Jan, Feb, Mar, Apr, May, Jun, Jul, Aug, Sep, Oct, Nov, Dec]
""",
        encoding="utf-8",
    )
    (tmp_path / "fr.yml").write_text(
        """\
fr:
  app:
    name: Polyglot
    welcome: "Bienvenue sur %{app}, %{name} !"
  inbox:
    zero: Votre boîte est vide
    one: Vous avez un message
    other: "Vous avez %{count} messages"
  date:
    formats:
      long: "%A %d %B %Y"
    day_names: [dimanche, lundi, mardi, mercredi, jeudi, vendredi, samedi]
    month_names: [~, janvier, février, mars, avril, mai, juin, juillet, août, septembre, octobre, novembre, décembre]
""",
        encoding="utf-8",
    )
    (tmp_path / "overrides.py").write_text(
        'translations = {"en": {"app": {"tagline": lambda key, options: "Say it in any language"}}}\n',
        encoding="utf-8",
    )
    return tmp_path
