"""Curated per-100g nutrition table (USDA-based estimates)."""

from collections.abc import Mapping
from types import MappingProxyType

from nutrition_engine.domain.nutrition import CanonicalFood, MacroProfile


def _row(
    protein: float, fiber: float, calories: float, carbs: float, fat: float
) -> MacroProfile:
    return MacroProfile(
        calories=calories,
        protein_g=protein,
        fat_g=fat,
        carbs_g=carbs,
        fiber_g=fiber,
    )


# Columns: protein, fiber, calories, carbs, fat. Legumes are cooked values.
_PER_100G: dict[str, MacroProfile] = {
    # Proteins
    "chicken breast": _row(31, 0, 165, 0, 3.6),
    "chicken thigh": _row(26, 0, 209, 0, 10.9),
    "salmon": _row(25, 0, 208, 0, 12.4),
    "tuna": _row(29.9, 0, 144, 0, 4.9),
    "shrimp": _row(18, 0, 85, 0.9, 0.5),
    "cooked shrimp": _row(24, 0, 99, 0.2, 0.3),
    "egg": _row(13, 0, 155, 1.1, 11),
    "ground turkey": _row(27, 0, 189, 0, 8.3),
    "tofu": _row(17.3, 2.3, 144, 3.5, 9),

    # Grains & Starches
    "quinoa": _row(14.1, 7, 368, 64.2, 6.1),
    "cooked quinoa": _row(4.4, 2.8, 120, 22, 1.9),
    "brown rice": _row(7.9, 3.5, 370, 77, 2.9),
    "cooked brown rice": _row(2.6, 1.8, 123, 25, 1),
    "oats": _row(16.9, 10.1, 389, 66.3, 6.9),
    "cooked oatmeal": _row(2.5, 1.7, 68, 12, 1.4),
    "sweet potato": _row(2, 3, 86, 20.1, 0.1),

    # Legumes (cooked values)
    "black beans": _row(8.9, 8.3, 132, 23, 0.5),
    "chickpeas": _row(8.9, 8, 164, 27.4, 2.6),
    "lentils": _row(9, 7.9, 116, 20.1, 0.4),
    "cooked lentils": _row(9, 7.9, 116, 20.1, 0.4),
    "kidney beans": _row(8.7, 6.4, 127, 22.8, 0.5),

    # Vegetables
    "spinach": _row(2.9, 2.2, 23, 3.6, 0.4),
    "cooked spinach": _row(3.0, 2.4, 23, 3.8, 0.3),
    "kale": _row(4.3, 3.6, 49, 8.8, 0.9),
    "steamed kale": _row(2.9, 2.6, 36, 7.3, 0.5),
    "broccoli": _row(2.8, 2.6, 34, 6.6, 0.4),
    "steamed broccoli": _row(3.7, 3.3, 35, 7.2, 0.4),
    "bell pepper": _row(1, 2.5, 31, 7.3, 0.3),
    "red bell pepper": _row(1, 2.5, 31, 7.3, 0.3),
    "cucumber": _row(0.7, 0.5, 16, 4, 0.1),
    "tomato": _row(0.9, 1.2, 18, 3.9, 0.2),
    "cherry tomatoes": _row(0.9, 1.2, 18, 3.9, 0.2),
    "mixed greens": _row(2.2, 2.9, 20, 3.6, 0.3),
    "arugula": _row(2.6, 1.6, 25, 3.7, 0.7),
    "corn": _row(3.3, 2.4, 96, 21, 1.5),
    "corn kernels": _row(3.3, 2.4, 96, 21, 1.5),
    "red onion": _row(1.1, 1.7, 40, 9.3, 0.1),
    "onion": _row(1.1, 1.7, 40, 9.3, 0.1),

    # Fruits & Fats
    "avocado": _row(2, 6.7, 160, 8.5, 14.7),
    "olive oil": _row(0, 0, 884, 0, 100),
    "coconut oil": _row(0, 0, 862, 0, 99.1),
    "balsamic vinaigrette": _row(0.1, 0, 88, 8.8, 6.7),
    "vinaigrette": _row(0.1, 0, 449, 3.9, 49.8),
    "ranch dressing": _row(0.7, 0, 431, 4.3, 45.3),
    "fresh dill": _row(3.5, 2.1, 43, 7, 1.1),
    "nuts": _row(15, 8, 550, 16, 49),
    "almonds": _row(21.2, 12.5, 579, 21.6, 49.9),
    "walnuts": _row(15.2, 6.7, 654, 13.7, 65.2),

    # Dairy & Alternatives
    "greek yogurt": _row(10, 0, 59, 3.6, 0.4),
    "cottage cheese": _row(11, 0, 98, 3.4, 4.3),
    "cheddar cheese": _row(25, 0, 403, 3.1, 33.3),
    "mozzarella": _row(22.2, 0, 300, 2.2, 22.4),

    # Herbs & Seasonings
    "cilantro": _row(2.1, 2.8, 23, 3.7, 0.5),
    "fresh cilantro": _row(2.1, 2.8, 23, 3.7, 0.5),
    "parsley": _row(3, 3.3, 36, 6.3, 0.8),
    "basil": _row(3.2, 1.6, 22, 2.6, 0.6),
    "fresh basil": _row(3.2, 1.6, 22, 2.6, 0.6),
    "oregano": _row(9, 42.5, 265, 68.9, 4.3),
    "thyme": _row(5.6, 14, 101, 24.5, 1.7),
    "rosemary": _row(3.3, 14.1, 131, 20.7, 5.9),
    "dill": _row(3.5, 2.1, 43, 7, 1.1),
    "mint": _row(3.8, 8, 70, 14.9, 0.9),
    "lime juice": _row(0.4, 0.4, 25, 8.4, 0.2),
    "lemon juice": _row(0.4, 0.3, 22, 6.9, 0.2),
    "lime": _row(0.7, 2.8, 30, 10.5, 0.2),
    "lemon": _row(1.1, 4.7, 29, 9.3, 0.3),

    # More Vegetables (raw unless specified)
    "asparagus": _row(2.2, 2.1, 20, 3.9, 0.1),
    "cooked asparagus": _row(2.4, 2.1, 22, 4.1, 0.2),
    "green beans": _row(1.8, 2.7, 31, 7, 0.2),
    "cooked green beans": _row(1.8, 2.7, 31, 7, 0.2),
    "carrots": _row(0.9, 2.8, 41, 9.6, 0.2),
    "baby carrots": _row(0.9, 2.8, 41, 9.6, 0.2),
    "celery": _row(0.7, 1.6, 14, 3, 0.2),
    "zucchini": _row(1.2, 1, 17, 3.1, 0.3),
    "yellow squash": _row(1.2, 1.2, 20, 4.3, 0.2),
    "eggplant": _row(1, 3, 25, 6, 0.2),
    "mushrooms": _row(3.1, 1, 22, 3.3, 0.3),
    "white mushrooms": _row(3.1, 1, 22, 3.3, 0.3),
    "sauteed mushrooms": _row(3.9, 1.7, 35, 5.3, 0.6),
    "portobello mushrooms": _row(2.1, 1.3, 22, 3.9, 0.4),
    "shiitake mushrooms": _row(2.2, 2.5, 34, 6.8, 0.5),
    "cauliflower": _row(1.9, 2, 25, 5, 0.3),
    "steamed cauliflower": _row(2.3, 2.3, 23, 4.1, 0.5),
    "brussels sprouts": _row(3.4, 3.8, 43, 8.9, 0.3),
    "cabbage": _row(1.3, 2.5, 25, 5.8, 0.1),
    "red cabbage": _row(1.4, 2.1, 31, 7.4, 0.2),
    "radishes": _row(0.7, 1.6, 16, 3.4, 0.1),
    "beets": _row(1.6, 2.8, 43, 9.6, 0.2),
    "turnips": _row(0.9, 1.8, 28, 6.4, 0.1),

    # More Leafy Greens
    "romaine lettuce": _row(1.2, 2.1, 17, 3.3, 0.3),
    "iceberg lettuce": _row(0.9, 1.2, 14, 3, 0.1),
    "butter lettuce": _row(1.4, 1.1, 13, 2.2, 0.2),
    "swiss chard": _row(1.8, 1.6, 19, 3.7, 0.2),
    "collard greens": _row(3, 4, 32, 5.4, 0.6),
    "bok choy": _row(1.5, 1, 13, 2.2, 0.2),
    "watercress": _row(2.3, 0.5, 11, 1.3, 0.1),

    # More Proteins
    "cod": _row(18, 0, 82, 0, 0.7),
    "halibut": _row(18.6, 0, 91, 0, 1.3),
    "mahi mahi": _row(20.2, 0, 85, 0, 0.7),
    "tilapia": _row(20.1, 0, 96, 0, 1.7),
    "canned tuna": _row(29.1, 0, 116, 0, 0.8),
    "lean beef": _row(22, 0, 142, 0, 4.9),
    "ground beef 90/10": _row(22.3, 0, 176, 0, 8),
    "pork tenderloin": _row(22.8, 0, 143, 0, 4.1),
    "lamb": _row(20.3, 0, 165, 0, 7.4),
    "duck breast": _row(18.3, 0, 123, 0, 4.2),

    # More Seafood
    "crab": _row(18.1, 0, 87, 0, 1.1),
    "lobster": _row(19, 0, 89, 0.5, 0.9),
    "scallops": _row(17.9, 0, 88, 4.7, 0.8),
    "mussels": _row(11.9, 0, 86, 3.7, 2.2),
    "oysters": _row(9, 0, 68, 4.9, 2.5),
    "clams": _row(15.5, 0, 74, 2.6, 1),

    # More Grains & Starches
    "wild rice": _row(4, 1.8, 101, 21.3, 0.3),
    "cooked wild rice": _row(4, 1.8, 101, 21.3, 0.3),
    "white rice": _row(2.7, 0.4, 130, 28, 0.3),
    "cooked white rice": _row(2.7, 0.4, 130, 28, 0.3),
    "jasmine rice": _row(2.9, 0.4, 129, 28.2, 0.2),
    "basmati rice": _row(2.7, 0.4, 121, 25, 0.4),
    "barley": _row(12.5, 17.3, 354, 73.5, 2.3),
    "cooked barley": _row(2.3, 3.8, 123, 28.2, 0.4),
    "bulgur": _row(12.3, 18.3, 342, 75.9, 1.3),
    "cooked bulgur": _row(3.1, 4.5, 83, 18.6, 0.2),
    "farro": _row(15, 10.7, 340, 67.1, 2.5),
    "cooked farro": _row(5, 3.2, 170, 34, 1),
    "millet": _row(11, 8.5, 378, 73, 4.2),
    "cooked millet": _row(3.5, 1.3, 119, 23, 1),

    # Pasta & Noodles
    "whole wheat pasta": _row(13.4, 6.8, 348, 71.2, 2.5),
    "cooked whole wheat pasta": _row(5, 3.2, 124, 25.1, 0.5),
    "regular pasta": _row(13, 2.5, 371, 74.7, 1.5),
    "cooked pasta": _row(5, 1.8, 131, 25, 1.1),
    "soba noodles": _row(5.1, 1.2, 99, 21.4, 0.1),
    "rice noodles": _row(0.9, 0.4, 109, 25.2, 0.2),

    # More Legumes & Beans
    "pinto beans": _row(9.0, 9.0, 143, 26.2, 0.7),
    "navy beans": _row(8.2, 6.3, 140, 26.1, 0.6),
    "great northern beans": _row(8.3, 6.2, 118, 21.1, 0.5),
    "cannellini beans": _row(8.9, 6.3, 124, 22.7, 0.5),
    "lima beans": _row(7.8, 7.0, 115, 20.9, 0.4),
    "garbanzo beans": _row(8.9, 8, 164, 27.4, 2.6),
    "edamame": _row(11.9, 5.2, 121, 8.9, 5.2),
    "green peas": _row(5.4, 5.7, 84, 14.5, 0.4),
    "split peas": _row(25.4, 8.3, 341, 60.4, 1.2),
    "cooked split peas": _row(8.3, 8.2, 118, 21.1, 0.8),

    # More Nuts & Seeds
    "cashews": _row(18.2, 3.3, 553, 30.2, 43.9),
    "pistachios": _row(20.2, 10.6, 560, 27.2, 45.3),
    "pecans": _row(9.2, 9.6, 691, 13.9, 72),
    "brazil nuts": _row(14.3, 7.5, 659, 12.3, 67.1),
    "macadamia nuts": _row(7.9, 8.6, 718, 13.8, 75.8),
    "pine nuts": _row(13.7, 3.7, 673, 13.1, 68.4),
    "sunflower seeds": _row(20.8, 8.6, 584, 20, 51.5),
    "pumpkin seeds": _row(19, 1.7, 446, 54, 19),
    "chia seeds": _row(17, 34.4, 486, 42.1, 30.7),
    "flax seeds": _row(18.3, 27.3, 534, 28.9, 42.2),
    "hemp seeds": _row(31, 4, 553, 8.7, 48.8),
    "sesame seeds": _row(17.7, 11.8, 573, 23.4, 49.7),

    # More Fruits
    "berries": _row(0.7, 2.4, 43, 11.9, 0.3),
    "strawberries": _row(0.7, 2, 32, 7.7, 0.3),
    "blueberries": _row(0.7, 2.4, 57, 14.5, 0.3),
    "raspberries": _row(1.2, 6.5, 52, 11.9, 0.7),
    "blackberries": _row(1.4, 5.3, 43, 9.6, 0.5),
    "banana": _row(1.1, 2.6, 89, 22.8, 0.3),
    "apple": _row(0.3, 2.4, 52, 13.8, 0.2),
    "orange": _row(0.9, 2.4, 47, 11.8, 0.1),
    "grapefruit": _row(0.8, 1.6, 42, 10.7, 0.1),
    "pear": _row(0.4, 3.1, 57, 15.2, 0.1),
    "peach": _row(0.9, 1.5, 39, 9.5, 0.3),
    "plum": _row(0.7, 1.4, 46, 11.4, 0.3),
    "grapes": _row(0.6, 0.9, 62, 16.3, 0.2),
    "pineapple": _row(0.5, 1.4, 50, 13.1, 0.1),
    "mango": _row(0.8, 1.6, 60, 15, 0.4),
    "kiwi": _row(1.1, 3, 61, 14.7, 0.5),

    # Common cooking ingredients
    "garlic": _row(6.4, 2.1, 149, 33, 0.5),
    "ginger": _row(1.8, 2, 80, 17.8, 0.8),
    "onion powder": _row(10.4, 15.2, 341, 79.1, 1),
    "garlic powder": _row(16.6, 9, 331, 72.7, 0.7),
    "black pepper": _row(10.4, 25.3, 251, 63.9, 3.3),
    "cayenne pepper": _row(12, 27.2, 318, 56.6, 17.3),
    "turmeric": _row(7.8, 21, 354, 64.9, 9.9),
    "cinnamon": _row(4, 53.1, 247, 80.6, 1.2),
    "cumin": _row(17.8, 10.5, 375, 44.2, 22.3),
    "chili powder": _row(13.5, 34.8, 282, 49.7, 14.3),
    "paprika": _row(14.1, 37.4, 282, 53.9, 12.9),
    "salt": _row(0, 0, 0, 0, 0),
    "sea salt": _row(0, 0, 0, 0, 0),

    # Additional Whole Grains & Ancient Grains
    "steel cut oats": _row(10.8, 8.2, 379, 67.7, 6.5),
    "rolled oats": _row(13.2, 10.1, 379, 67.7, 6.5),
    "quick oats": _row(13.2, 10.1, 379, 67.7, 6.5),
    "instant oats": _row(11.7, 9.4, 379, 70.1, 6.2),
    "amaranth": _row(13.6, 6.7, 371, 65.3, 7),
    "buckwheat": _row(13.3, 10, 343, 71.5, 3.4),
    "cooked buckwheat": _row(3.4, 2.7, 92, 19.9, 0.6),
    "spelt": _row(14.6, 10.7, 338, 70.2, 2.4),
    "cooked spelt": _row(5.5, 3.9, 127, 26.4, 0.9),
    "wheat berries": _row(15.4, 12.2, 329, 71.2, 2.5),
    "freekeh": _row(14.7, 13.3, 325, 72.1, 2.3),
    "kamut": _row(11.1, 11.3, 337, 70.4, 2.1),

    # More Rice Varieties
    "black rice": _row(8.9, 4.9, 356, 75.6, 3.2),
    "cooked black rice": _row(3.5, 1.8, 160, 34.2, 1.6),
    "red rice": _row(7.9, 2.3, 405, 86.2, 2.3),
    "cooked red rice": _row(2.3, 0.8, 123, 25.8, 0.7),
    "forbidden rice": _row(8.9, 4.9, 356, 75.6, 3.2),

    # Additional Proteins - Plant Based
    "tempeh": _row(19, 9, 192, 9.4, 11),
    "seitan": _row(75, 5.8, 370, 14, 1.9),
    "hemp protein powder": _row(50, 18, 390, 8, 11),
    "pea protein powder": _row(80, 7, 380, 7, 3),
    "nutritional yeast": _row(45, 27, 325, 36, 5),

    # More Animal Proteins
    "chicken wings": _row(23.6, 0, 203, 0, 12.8),
    "chicken drumsticks": _row(23.6, 0, 172, 0, 8.4),
    "turkey breast": _row(29.9, 0, 135, 0, 1),
    "ground chicken": _row(20.9, 0, 143, 0, 5.6),
    "ground pork": _row(25.7, 0, 263, 0, 18.3),
    "pork chops": _row(25.4, 0, 231, 0, 14.8),
    "bacon": _row(37, 0, 541, 1.4, 42),
    "canadian bacon": _row(20.2, 0, 147, 1.3, 6.2),
    "ham": _row(22.9, 0, 145, 0.6, 5.5),
    "prosciutto": _row(25.8, 0, 217, 0, 12.1),
    "venison": _row(22.5, 0, 120, 0, 2.4),
    "bison": _row(28.4, 0, 146, 0, 2.4),

    # More Fish & Seafood
    "sardines": _row(24.6, 0, 208, 0, 11.5),
    "anchovies": _row(20.4, 0, 131, 0, 4.8),
    "mackerel": _row(18.6, 0, 205, 0, 13.9),
    "sea bass": _row(18.4, 0, 97, 0, 2),
    "sole": _row(16.8, 0, 70, 0, 0.9),
    "flounder": _row(18.8, 0, 86, 0, 1.2),
    "snapper": _row(22.4, 0, 100, 0, 1.3),
    "trout": _row(20.8, 0, 148, 0, 6.6),
    "catfish": _row(16.4, 0, 105, 0, 2.9),
    "pollock": _row(19.4, 0, 92, 0, 1),

    # More Dairy & Alternatives
    "whole milk": _row(3.2, 0, 61, 4.8, 3.3),
    "2% milk": _row(3.3, 0, 50, 4.9, 2),
    "1% milk": _row(3.4, 0, 42, 5, 1),
    "skim milk": _row(3.4, 0, 34, 5, 0.2),
    "buttermilk": _row(3.3, 0, 40, 4.8, 0.9),
    "heavy cream": _row(2.1, 0, 345, 2.8, 37),
    "half and half": _row(3.2, 0, 131, 4.3, 11.5),
    "sour cream": _row(2.4, 0, 193, 4.6, 19.4),
    "cream cheese": _row(5.9, 0, 342, 4.1, 34.2),
    "ricotta cheese": _row(11.4, 0, 174, 3.2, 13),
    "feta cheese": _row(14.2, 0, 264, 4.1, 21.3),
    "goat cheese": _row(18.5, 0, 364, 2.5, 29.8),
    "parmesan cheese": _row(35.8, 0, 431, 4.1, 28.6),
    "swiss cheese": _row(26.9, 0, 380, 5.4, 27.8),
    "provolone cheese": _row(25.6, 0, 351, 2.1, 26.6),
    "brie cheese": _row(20.8, 0, 334, 0.5, 27.7),
    "camembert cheese": _row(19.8, 0, 300, 0.5, 24.3),

    # Dairy Alternatives
    "almond milk": _row(0.6, 0.7, 17, 1.5, 1.2),
    "oat milk": _row(1, 1.4, 47, 7.6, 1.5),
    "soy milk": _row(2.9, 0.4, 33, 1.8, 1.6),
    "coconut milk": _row(2.3, 2.2, 230, 5.5, 23.8),
    "cashew milk": _row(0.5, 0.1, 25, 1, 2),
    "rice milk": _row(0.3, 0.3, 47, 9.2, 1),

    # More Vegetables - Cruciferous
    "kohlrabi": _row(1.7, 3.6, 27, 6.2, 0.1),
    "rutabaga": _row(1.2, 2.3, 38, 8.7, 0.2),
    "daikon radish": _row(0.6, 1.6, 18, 4.1, 0.1),
    "fennel": _row(1.2, 3.1, 31, 7.3, 0.2),
    "leeks": _row(1.5, 1.8, 61, 14.2, 0.3),
    "artichokes": _row(3.3, 8.6, 47, 10.5, 0.2),
    "artichoke hearts": _row(2.9, 5.4, 22, 5.1, 0.1),

    # Root Vegetables
    "parsnips": _row(1.2, 4.9, 75, 18, 0.3),
    "jicama": _row(0.7, 4.9, 38, 8.8, 0.1),
    "water chestnuts": _row(1, 3, 97, 23.9, 0.1),
    "lotus root": _row(2.6, 4.9, 74, 17.2, 0.1),

    # Squash Varieties
    "butternut squash": _row(1, 2, 45, 11.7, 0.1),
    "acorn squash": _row(0.9, 1.5, 40, 10.4, 0.1),
    "delicata squash": _row(1.8, 2, 40, 11, 0.1),
    "kabocha squash": _row(1.6, 1.2, 34, 8.4, 0.1),
    "spaghetti squash": _row(0.6, 1.5, 31, 7, 0.6),
    "pumpkin": _row(1.8, 0.5, 26, 6.5, 0.1),

    # More Fruits - Tropical & Others
    "papaya": _row(0.5, 1.7, 43, 10.8, 0.3),
    "passion fruit": _row(2.2, 10.4, 97, 23, 0.7),
    "guava": _row(2.6, 5.4, 68, 14.3, 1),
    "dragon fruit": _row(1.2, 3, 60, 13, 0.4),
    "star fruit": _row(1, 2.8, 31, 6.7, 0.3),
    "lychee": _row(0.8, 1.3, 66, 16.5, 0.4),
    "pomegranate": _row(1.7, 4, 83, 18.7, 1.2),
    "cranberries": _row(0.4, 4.6, 46, 12.2, 0.1),
    "dried cranberries": _row(0.1, 1.4, 308, 82.4, 1.1),
    "cherries": _row(1.1, 2.1, 63, 16, 0.2),
    "apricots": _row(1.4, 2, 48, 11.1, 0.4),
    "figs": _row(0.8, 2.9, 74, 19.2, 0.3),
    "dates": _row(1.8, 6.7, 277, 75, 0.2),
    "raisins": _row(3.1, 3.7, 299, 79.2, 0.5),

    # Melons
    "cantaloupe": _row(0.8, 0.9, 34, 8.2, 0.2),
    "honeydew": _row(0.5, 0.8, 36, 9.1, 0.1),
    "watermelon": _row(0.6, 0.4, 30, 7.6, 0.2),

    # Stone Fruits
    "nectarines": _row(1.1, 1.7, 44, 10.6, 0.3),
    "persimmons": _row(0.6, 3.6, 70, 18.6, 0.2),

    # More Legumes
    "adzuki beans": _row(7.5, 7.3, 128, 25, 0.2),
    "mung beans": _row(8.2, 8.5, 105, 19.2, 0.4),
    "fava beans": _row(7.6, 5.4, 110, 19.7, 0.4),
    "black eyed peas": _row(8.0, 6.0, 116, 20.8, 0.5),
    "red beans": _row(8.2, 6.9, 127, 22.8, 0.5),
    "white beans": _row(8.9, 6.3, 124, 22.7, 0.5),

    # Specialty Items
    "spirulina": _row(57.5, 3.6, 290, 23.9, 7.7),
    "chlorella": _row(58.4, 0.3, 336, 14.8, 11.4),
    "wheat grass powder": _row(15, 40, 198, 42, 1.5),

    # Prepared forms referenced by unit overrides
    "cooked chicken": _row(31, 0, 165, 0, 3.6),
    "cooked salmon": _row(25, 0, 208, 0, 12.4),
    "cooked tuna": _row(29.9, 0, 144, 0, 4.9),
    "diced tofu": _row(17.3, 2.3, 144, 3.5, 9),
    "crumbled tofu": _row(17.3, 2.3, 144, 3.5, 9),
    "cooked soba noodles": _row(5.1, 1.2, 99, 21.4, 0.1),
    "cooked rice noodles": _row(0.9, 0.4, 109, 25.2, 0.2),
    "chopped almonds": _row(21.2, 12.5, 579, 21.6, 49.9),
    "sliced almonds": _row(21.2, 12.5, 579, 21.6, 49.9),
    "chopped walnuts": _row(15.2, 6.7, 654, 13.7, 65.2),

    # Cooked forms of dry grains
    "cooked amaranth": _row(3.8, 2.1, 102, 18.7, 1.6),
    "cooked kamut": _row(5.7, 4.3, 132, 27.6, 0.8),
    "cooked wheat berries": _row(5.0, 3.9, 130, 27.5, 0.8),
    "cooked freekeh": _row(4.9, 4.0, 120, 24.6, 0.8),
}

# Dry-weight keys and the cooked key resolution should use instead.
DRY_WEIGHT_COOKED_FORMS: Mapping[str, str] = MappingProxyType(
    {
        "quinoa": "cooked quinoa",
        "brown rice": "cooked brown rice",
        "oats": "cooked oatmeal",
        "steel cut oats": "cooked oatmeal",
        "rolled oats": "cooked oatmeal",
        "quick oats": "cooked oatmeal",
        "instant oats": "cooked oatmeal",
        "barley": "cooked barley",
        "bulgur": "cooked bulgur",
        "farro": "cooked farro",
        "millet": "cooked millet",
        "whole wheat pasta": "cooked whole wheat pasta",
        "regular pasta": "cooked pasta",
        "split peas": "cooked split peas",
        "amaranth": "cooked amaranth",
        "buckwheat": "cooked buckwheat",
        "spelt": "cooked spelt",
        "wheat berries": "cooked wheat berries",
        "freekeh": "cooked freekeh",
        "kamut": "cooked kamut",
        "black rice": "cooked black rice",
        "red rice": "cooked red rice",
        "forbidden rice": "cooked black rice",
    }
)

CANONICAL_FOODS: Mapping[str, CanonicalFood] = MappingProxyType(
    {
        key: CanonicalFood(
            key=key,
            per_100g=per_100g,
            cooked_form=DRY_WEIGHT_COOKED_FORMS.get(key),
        )
        for key, per_100g in _PER_100G.items()
    }
)
