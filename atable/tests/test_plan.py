import unittest
from atable.domain.Plan import Plan
from atable.logic.generation.errors import InvalidInput


class TestPlan(unittest.TestCase):
    def test_from_dict_converts_day_keys(self):
        plan = Plan.from_dict({"1": {"midi": "Riz", "soir": "Soupe"}, "2": {"midi": "Pâtes"}})
        self.assertEqual(plan.days(), [1, 2])
        self.assertEqual(plan.get(2, "soir"), "")
        self.assertEqual(plan.to_dict(), {1: {"midi": "Riz", "soir": "Soupe"}, 2: {"midi": "Pâtes", "soir": ""}})

    def test_weekday_schema_is_rejected(self):
        with self.assertRaises(InvalidInput):
            Plan.from_dict({"lundi": {"midi": "Riz", "soir": ""}})

    def test_invalid_days(self):
        for bad in ({"0": {}}, {"abc": {}}, {"3": "Riz"}):
            with self.assertRaises(InvalidInput, msg=repr(bad)):
                Plan.from_dict(bad)

    def test_only_integer_or_digit_keys(self):
        for key in (True, 1.7, 2.0, None, "1.5", "-3"):
            with self.assertRaises(InvalidInput, msg=repr(key)):
                Plan.from_dict({key: {"midi": "Riz", "soir": ""}})
        plan = Plan.from_dict({" 4 ": {"midi": "Riz"}, 5: {"soir": "Soupe"}})
        self.assertEqual(plan.days(), [4, 5])

    def test_set_and_meal_names(self):
        plan = Plan.empty([1, 2], week_number=1)
        plan.set(1, "midi", "Riz")
        plan.set(2, "soir", "Soupe")
        self.assertEqual(list(plan.meal_names()), ["Riz", "Soupe"])
        with self.assertRaises(InvalidInput):
            plan.set(1, "gouter", "Crêpes")

    def test_copy_is_independent(self):
        plan = Plan.from_dict({1: {"midi": "Riz", "soir": ""}}, week_number=2, enabled=False)
        clone = plan.copy()
        clone.set(1, "soir", "Soupe")
        self.assertEqual(plan.get(1, "soir"), "")
        self.assertEqual((clone.week_number, clone.enabled), (2, False))


if __name__ == '__main__':
    unittest.main()
