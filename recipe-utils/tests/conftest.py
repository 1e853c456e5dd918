import pytest

RECIPE_TEXT = """Recipe 1: Tomato Soup

Ingredients:
- Tomatoes (2 lbs)
- Salt
- Black Pepper
- Garlic

Recipe 2: Garlic Bread

Ingredients:
- Bread
- Garlic
- Butter
- Salt

Recipe 3: Pepper Steak

Ingredients:
- Steak
- Black pepper (cracked)
- Salt

Store List:

Tomatoes: Farmers Market, Aisle 1
Salt: Grocer, Aisle 7
Garlic: Grocer, Aisle 3
Salt: Corner Shop, Aisle 2
"""


@pytest.fixture
def recipe_text():
    return RECIPE_TEXT


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPE_TEXT, encoding="utf-8")
    return path
