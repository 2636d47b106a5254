import random
import unittest
from atable.domain.Plan import Plan
from atable.logic.generation.composer import Failure
from atable.logic.generation.errors import InvalidInput
from atable.logic.generation.generator import (
    MergeMode, PlanGenerator, merge_plans, validate_ingredients
)
from atable.logic.generation.partition import partition
from atable.utilities.constants import NO_SUGGESTION


def _ingredients():
    return {
        "Plats": {"mealEnabled": {"midi": True, "soir": False},
                  "items": ["Lasagnes", "Curry", "Tajine", "Risotto", "Gratin", "Chili", "Paella"]},
        "Soupes": {"mealEnabled": {"midi": False, "soir": True},
                   "items": ["Minestrone", "Potage", "Velouté", "Gaspacho", "Pho", "Bortsch", "Harira"]},
    }


class TestGenerateWeek(unittest.TestCase):
    def setUp(self):
        self.generator = PlanGenerator(rng=random.Random(11))

    def test_fills_every_day_with_distinct_meals(self):
        plan = self.generator.generate_week(_ingredients(), range(1, 8))
        self.assertEqual(plan.days(), list(range(1, 8)))
        midis = [plan.get(d, "midi") for d in plan.days()]
        soirs = [plan.get(d, "soir") for d in plan.days()]
        self.assertEqual(sorted(midis), sorted(_ingredients()["Plats"]["items"]))
        self.assertEqual(sorted(soirs), sorted(_ingredients()["Soupes"]["items"]))

    def test_meals_combine_every_active_category(self):
        ingredients = {
            "Féculents": {"mealEnabled": {"midi": True, "soir": True}, "items": ["Riz"]},
            "Protéines": {"mealEnabled": {"midi": True, "soir": False}, "items": ["Poulet"]},
            "Légumes": {"mealEnabled": {"midi": True, "soir": True}, "items": ["Brocoli"]},
        }
        plan = self.generator.generate_week(ingredients, [1])
        self.assertEqual(plan.get(1, "midi"), "Riz, Poulet et Brocoli")
        self.assertEqual(plan.get(1, "soir"), "Riz avec Brocoli")

    def test_duplicates_are_kept_when_choices_run_out(self):
        ingredients = {"Féculents": {"mealEnabled": {"midi": True, "soir": True}, "items": ["Riz"]}}
        plan = self.generator.generate_week(ingredients, [1, 2])
        self.assertEqual(plan.to_dict(), {1: {"midi": "Riz", "soir": "Riz"}, 2: {"midi": "Riz", "soir": "Riz"}})

    def test_slot_without_active_category_stays_blank(self):
        ingredients = {"Plats": _ingredients()["Plats"]}
        plan = self.generator.generate_week(ingredients, [5, 6])
        self.assertEqual(plan.get(5, "soir"), "")
        self.assertEqual(plan.get(6, "soir"), "")
        self.assertNotEqual(plan.get(5, "midi"), "")

    def test_empty_range_gives_empty_plan(self):
        self.assertEqual(len(self.generator.generate_week(_ingredients(), [])), 0)

    def test_malformed_ingredients(self):
        with self.assertRaises(InvalidInput):
            self.generator.generate_week(["Riz"], [1])
        with self.assertRaises(InvalidInput):
            self.generator.generate_week({"Féculents": {"items": "Riz"}}, [1])


class TestGenerateAllWeeks(unittest.TestCase):
    def test_one_plan_per_range(self):
        ranges = partition(28, 4)
        weeks = PlanGenerator(rng=random.Random(3)).generate_all_weeks(_ingredients(), ranges)
        self.assertEqual(list(weeks), ["week1", "week2", "week3", "week4"])
        for week_range in ranges:
            plan = weeks[f"week{week_range.week_number}"]
            self.assertEqual(plan.days(), list(week_range.days))
            self.assertEqual(plan.week_number, week_range.week_number)
            midis = [plan.get(d, "midi") for d in plan.days()]
            self.assertEqual(len(midis), len(set(midis)))


class TestGenerateSingleMeal(unittest.TestCase):
    def setUp(self):
        self.generator = PlanGenerator(rng=random.Random(8))
        self.ingredients = {
            "Féculents": {"mealEnabled": {"midi": True, "soir": True}, "items": ["Riz", "Pâtes"]},
            "Protéines": {"mealEnabled": {"midi": True, "soir": False}, "items": ["Poulet"]},
        }

    def test_returns_unused_suggestion(self):
        suggestion = self.generator.generate_single_meal(self.ingredients, "midi", {" RIZ avec poulet "})
        self.assertEqual(suggestion, "Pâtes avec Poulet")

    def test_fails_instead_of_returning_a_duplicate(self):
        used = {"Riz avec Poulet", "Pâtes avec Poulet"}
        self.assertEqual(self.generator.single_max_attempts, 20)
        result = self.generator.generate_single_meal(self.ingredients, "midi", used)
        self.assertEqual(result, Failure(NO_SUGGESTION))

    def test_no_active_category(self):
        ingredients = {"Protéines": self.ingredients["Protéines"]}
        self.assertIsInstance(self.generator.generate_single_meal(ingredients, "soir"), Failure)

    def test_unknown_meal_type(self):
        with self.assertRaises(InvalidInput):
            self.generator.generate_single_meal(self.ingredients, "brunch")


class TestMergePlans(unittest.TestCase):
    def setUp(self):
        self.existing = Plan.from_dict({1: {"midi": "Pâtes", "soir": ""}})
        self.generated = Plan.from_dict({1: {"midi": "Riz", "soir": "Soupe"}})

    def test_fill_empty_keeps_user_meals(self):
        merged = merge_plans(self.existing, self.generated, MergeMode.FILL_EMPTY)
        self.assertEqual(merged.to_dict(), {1: {"midi": "Pâtes", "soir": "Soupe"}})

    def test_replace_all_takes_generated(self):
        merged = merge_plans(self.existing, self.generated, MergeMode.REPLACE_ALL)
        self.assertEqual(merged.to_dict(), {1: {"midi": "Riz", "soir": "Soupe"}})
        self.assertEqual(merged, self.generated)

    def test_whitespace_only_counts_as_empty(self):
        existing = Plan.from_dict({1: {"midi": "   ", "soir": "Omelette"}})
        merged = merge_plans(existing, self.generated, MergeMode.FILL_EMPTY)
        self.assertEqual(merged.to_dict(), {1: {"midi": "Riz", "soir": "Omelette"}})

    def test_missing_and_extra_days(self):
        existing = Plan.from_dict({3: {"midi": "Crêpes", "soir": ""}}, week_number=1, enabled=False)
        generated = Plan.from_dict({1: {"midi": "Riz", "soir": "Soupe"}, 2: {"midi": "Pâtes", "soir": ""}})
        for mode in MergeMode:
            merged = merge_plans(existing, generated, mode)
            self.assertEqual(merged.to_dict(), {
                3: {"midi": "Crêpes", "soir": ""},
                1: {"midi": "Riz", "soir": "Soupe"},
                2: {"midi": "Pâtes", "soir": ""},
            })
            self.assertEqual(merged.week_number, 1)
            self.assertFalse(merged.enabled)

    def test_inputs_are_not_mutated(self):
        merge_plans(self.existing, self.generated, MergeMode.FILL_EMPTY)
        merge_plans(self.existing, self.generated, MergeMode.REPLACE_ALL)
        self.assertEqual(self.existing.to_dict(), {1: {"midi": "Pâtes", "soir": ""}})
        self.assertEqual(self.generated.to_dict(), {1: {"midi": "Riz", "soir": "Soupe"}})

    def test_mode_from_replace_all_flag(self):
        self.assertIs(MergeMode.from_replace_all(True), MergeMode.REPLACE_ALL)
        self.assertIs(MergeMode.from_replace_all(False), MergeMode.FILL_EMPTY)


class TestValidateIngredients(unittest.TestCase):
    def test_requires_one_category_with_items(self):
        self.assertFalse(validate_ingredients({}))
        self.assertTrue(validate_ingredients(
            {"Légumes": {"mealEnabled": {"midi": True, "soir": False}, "items": ["Carotte"]}}))
        self.assertFalse(validate_ingredients(
            {"Légumes": {"mealEnabled": {"midi": True, "soir": False}, "items": []}}))

    def test_malformed_shapes(self):
        for bad in (None, [], "Légumes", {"Légumes": ["Carotte"]}, {"Légumes": {"items": [1, 2]}}):
            with self.assertRaises(InvalidInput, msg=repr(bad)):
                validate_ingredients(bad)


if __name__ == '__main__':
    unittest.main()
