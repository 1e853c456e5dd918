import pytest

from recipe_utils.recipes.parsing import StoreEntry
from recipe_utils.shopping.shopping_list import (
    UNKNOWN,
    SelectedIngredient,
    ShoppingList,
)


@pytest.fixture
def shopping_list():
    return ShoppingList(
        {
            "salt": StoreEntry(store="Grocer", aisle="7"),
            "tomatoes": StoreEntry(store="Farmers Market", aisle="1"),
            "butter": StoreEntry(store="Grocer", aisle="12"),
            "bread": StoreEntry(store="Grocer", aisle="Bakery"),
        }
    )


def test_add_looks_up_store(shopping_list):
    assert shopping_list.add("tomatoes (2 lbs)", "Tomato Soup") is True
    assert shopping_list.items == (
        SelectedIngredient(
            ingredient="tomatoes (2 lbs)",
            recipe="Tomato Soup",
            store="Farmers Market",
            aisle="1",
        ),
    )


def test_add_unknown_store(shopping_list):
    shopping_list.add("saffron", "Paella")
    item = shopping_list.items[0]
    assert (item.store, item.aisle) == (UNKNOWN, UNKNOWN) == ("Unknown", "Unknown")


def test_add_same_ingredient_and_recipe_once(shopping_list):
    assert shopping_list.add("salt", "Soup") is True
    assert shopping_list.add("salt", "Soup") is False
    assert len(shopping_list) == 1


def test_add_same_ingredient_for_different_recipes(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.add("salt", "Bread")
    assert [i.recipe for i in shopping_list] == ["Soup", "Bread"]


def test_add_uniqueness_uses_raw_text(shopping_list):
    """Different raw spellings are separate entries even if they normalize alike."""
    shopping_list.add("salt", "Soup")
    shopping_list.add("salt (1 tsp)", "Soup")
    assert len(shopping_list) == 2
    assert {i.store for i in shopping_list} == {"Grocer"}


def test_remove_across_recipes(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.add("butter", "Bread")
    shopping_list.add("salt", "Bread")
    assert shopping_list.remove("salt") == 2
    assert [i.ingredient for i in shopping_list] == ["butter"]


def test_remove_missing(shopping_list):
    shopping_list.add("salt", "Soup")
    assert shopping_list.remove("pepper") == 0
    assert shopping_list.remove("Salt") == 0
    assert len(shopping_list) == 1


def test_export(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.add("tomatoes (2 lbs)", "Soup")
    shopping_list.add("saffron", "Paella")
    assert shopping_list.export() == "salt\ntomatoes (2 lbs)\nsaffron"


def test_export_with_location(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.add("saffron", "Paella")
    assert shopping_list.export(include_location=True) == (
        "salt (Grocer, Aisle 7)\nsaffron (Unknown, Aisle Unknown)"
    )


def test_export_empty():
    assert ShoppingList().export() == ""


def test_save(shopping_list, tmp_path):
    shopping_list.add("salt", "Soup")
    shopping_list.add("butter", "Bread")
    path = shopping_list.save(tmp_path / "list.txt")
    assert path.read_text(encoding="utf-8") == "salt\nbutter"


def test_save_default_filename(shopping_list, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shopping_list.add("salt", "Soup")
    path = shopping_list.save()
    assert path.name == "selected_ingredients.txt"
    assert (tmp_path / "selected_ingredients.txt").read_text(encoding="utf-8") == "salt"


def test_clear(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.clear()
    assert len(shopping_list) == 0


def test_group_by_store(shopping_list):
    shopping_list.add("bread", "Toast")
    shopping_list.add("saffron", "Paella")
    shopping_list.add("butter", "Toast")
    shopping_list.add("salt", "Soup")
    shopping_list.add("tomatoes", "Soup")

    grouped = shopping_list.group_by_store()
    assert list(grouped) == ["Farmers Market", "Grocer", UNKNOWN]
    assert [i.ingredient for i in grouped["Grocer"]] == ["salt", "butter", "bread"]
    assert [i.ingredient for i in grouped[UNKNOWN]] == ["saffron"]


def test_to_dataframe(shopping_list):
    shopping_list.add("salt", "Soup")
    shopping_list.add("saffron", "Paella")
    df = shopping_list.to_dataframe()
    assert list(df.columns) == ["ingredient", "recipe", "store", "aisle"]
    assert df.to_dict("records") == [
        {"ingredient": "salt", "recipe": "Soup", "store": "Grocer", "aisle": "7"},
        {"ingredient": "saffron", "recipe": "Paella", "store": UNKNOWN, "aisle": UNKNOWN},
    ]


def test_items_is_a_snapshot(shopping_list):
    shopping_list.add("salt", "Soup")
    items = shopping_list.items
    shopping_list.add("butter", "Bread")
    assert len(items) == 1
