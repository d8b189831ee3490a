"""Static ingredient reference data.

Each entry maps a canonical ingredient name to its store category, the
aliases that should be folded into it, typical units and a rough price per
base unit used for shopping cost estimates.

The catalog is built once at import time and never mutated.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class GroceryCategory(StrEnum):
    """Store sections used to bucket a grocery list."""

    PRODUCE = "Produce"
    MEAT_SEAFOOD = "Meat & Seafood"
    DAIRY_EGGS = "Dairy & Eggs"
    BAKERY = "Bakery"
    PANTRY = "Pantry"
    SPICES = "Spices & Seasonings"
    FROZEN = "Frozen"
    BEVERAGES = "Beverages"
    CONDIMENTS = "Condiments & Sauces"
    SNACKS = "Snacks"
    OTHER = "Other"


# Category for ingredients the catalog does not know
DEFAULT_CATEGORY = GroceryCategory.PANTRY


@dataclass(frozen=True)
class IngredientInfo:
    """Reference data for one canonical ingredient."""

    name: str  # Canonical, lower-case
    category: GroceryCategory
    base_unit: str
    aliases: tuple[str, ...] = ()
    common_units: tuple[str, ...] = field(default=())
    density: float | None = None  # g per ml
    estimated_cost_per_unit: float | None = None  # USD per base_unit
    is_staple: bool = False

    @property
    def display_name(self) -> str:
        """Name as shown on a shopping list, e.g. "Olive Oil"."""
        return " ".join(word.capitalize() for word in self.name.split())


def _info(
    name: str,
    category: GroceryCategory,
    base_unit: str,
    aliases: tuple[str, ...] = (),
    common_units: tuple[str, ...] = (),
    density: float | None = None,
    cost: float | None = None,
    staple: bool = False,
) -> IngredientInfo:
    return IngredientInfo(
        name=name,
        category=category,
        base_unit=base_unit,
        aliases=aliases,
        common_units=common_units or (base_unit,),
        density=density,
        estimated_cost_per_unit=cost,
        is_staple=staple,
    )


_P = GroceryCategory.PRODUCE
_M = GroceryCategory.MEAT_SEAFOOD
_D = GroceryCategory.DAIRY_EGGS
_B = GroceryCategory.BAKERY
_PA = GroceryCategory.PANTRY
_S = GroceryCategory.SPICES
_F = GroceryCategory.FROZEN
_BV = GroceryCategory.BEVERAGES
_C = GroceryCategory.CONDIMENTS
_SN = GroceryCategory.SNACKS

INGREDIENT_CATALOG: tuple[IngredientInfo, ...] = (
    # Produce
    _info("onion", _P, "pcs", ("onions", "yellow onion", "yellow onions", "white onion",
                               "red onion", "red onions", "zwiebel", "zwiebeln"),
          ("pcs", "cup", "g"), cost=0.5),
    _info("garlic", _P, "clove", ("garlic clove", "garlic cloves", "cloves garlic",
                                  "clove garlic", "knoblauch"),
          ("clove", "tsp", "pcs"), cost=0.1),
    _info("tomato", _P, "pcs", ("tomatoes", "roma tomato", "roma tomatoes", "tomate", "tomaten"),
          ("pcs", "g", "cup"), cost=0.6),
    _info("cherry tomato", _P, "g", ("cherry tomatoes", "kirschtomaten"), ("g", "cup"), cost=0.008),
    _info("potato", _P, "pcs", ("potatoes", "kartoffel", "kartoffeln"), ("pcs", "g", "kg"), cost=0.4),
    _info("sweet potato", _P, "pcs", ("sweet potatoes",), ("pcs", "g"), cost=0.9),
    _info("carrot", _P, "pcs", ("carrots", "karotte", "karotten", "möhre", "möhren"),
          ("pcs", "g", "cup"), cost=0.25),
    _info("celery", _P, "stalk", ("celery stalk", "celery stalks", "celery ribs"),
          ("stalk", "cup"), cost=0.3),
    _info("bell pepper", _P, "pcs", ("bell peppers", "red bell pepper", "green bell pepper",
                                     "yellow bell pepper", "capsicum", "paprika schote"),
          ("pcs", "cup"), cost=1.2),
    _info("broccoli", _P, "g", ("broccoli florets", "brokkoli"), ("g", "cup", "pcs"), cost=0.006),
    _info("spinach", _P, "g", ("baby spinach", "spinat"), ("g", "cup"), cost=0.012),
    _info("lettuce", _P, "pcs", ("romaine", "romaine lettuce", "iceberg lettuce"), ("pcs",), cost=1.5),
    _info("cucumber", _P, "pcs", ("cucumbers", "gurke"), ("pcs",), cost=0.8),
    _info("zucchini", _P, "pcs", ("zucchinis", "courgette", "courgettes"), ("pcs", "g"), cost=0.9),
    _info("mushroom", _P, "g", ("mushrooms", "button mushrooms", "cremini mushrooms", "pilze"),
          ("g", "cup"), cost=0.01),
    _info("avocado", _P, "pcs", ("avocados",), ("pcs",), cost=1.3),
    _info("lemon", _P, "pcs", ("lemons", "lemon juice", "zitrone"), ("pcs", "tbsp"), cost=0.6),
    _info("lime", _P, "pcs", ("limes", "lime juice", "limette"), ("pcs", "tbsp"), cost=0.4),
    _info("apple", _P, "pcs", ("apples", "apfel", "äpfel"), ("pcs",), cost=0.7),
    _info("banana", _P, "pcs", ("bananas",), ("pcs",), cost=0.3),
    _info("ginger", _P, "g", ("fresh ginger", "ginger root", "ingwer"), ("g", "tsp", "tbsp"), cost=0.02),
    _info("parsley", _P, "bunch", ("fresh parsley", "flat-leaf parsley", "petersilie"),
          ("bunch", "tbsp", "cup"), cost=1.5),
    _info("cilantro", _P, "bunch", ("coriander leaves", "fresh cilantro", "koriander"),
          ("bunch", "tbsp", "cup"), cost=1.2),
    _info("basil", _P, "bunch", ("fresh basil", "basil leaves", "basilikum"),
          ("bunch", "tbsp", "cup"), cost=2.0),
    _info("green onion", _P, "pcs", ("green onions", "scallion", "scallions", "spring onion",
                                     "spring onions"), ("pcs", "bunch"), cost=0.2),
    # Meat & Seafood
    _info("chicken breast", _M, "g", ("chicken breasts", "boneless skinless chicken breast",
                                      "boneless chicken breast", "hähnchenbrust"),
          ("g", "lb", "pcs"), cost=0.011),
    _info("chicken thigh", _M, "g", ("chicken thighs",), ("g", "lb", "pcs"), cost=0.009),
    _info("ground beef", _M, "g", ("minced beef", "beef mince", "hackfleisch"), ("g", "lb"), cost=0.012),
    _info("beef steak", _M, "g", ("steak", "sirloin steak", "rindersteak"), ("g", "lb"), cost=0.025),
    _info("pork chop", _M, "pcs", ("pork chops",), ("pcs", "g"), cost=3.0),
    _info("bacon", _M, "slice", ("bacon slices", "bacon strips", "speck"), ("slice", "g"), cost=0.4),
    _info("salmon", _M, "g", ("salmon fillet", "salmon fillets", "lachs"), ("g", "lb", "pcs"), cost=0.03),
    _info("shrimp", _M, "g", ("shrimps", "prawns", "garnelen"), ("g", "lb"), cost=0.025),
    _info("tuna", _M, "can", ("canned tuna", "tuna in water", "thunfisch"), ("can", "g"), cost=1.8),
    # Dairy & Eggs
    _info("egg", _D, "pcs", ("eggs", "large egg", "large eggs", "ei", "eier"), ("pcs",), cost=0.3),
    _info("milk", _D, "ml", ("whole milk", "skim milk", "2% milk", "milch"), ("ml", "cup", "l"),
          density=1.03, cost=0.0012),
    _info("butter", _D, "g", ("unsalted butter", "salted butter"), ("g", "tbsp", "cup"),
          density=0.91, cost=0.012),
    _info("heavy cream", _D, "ml", ("cream", "whipping cream", "heavy whipping cream", "sahne"),
          ("ml", "cup"), density=1.0, cost=0.005),
    _info("sour cream", _D, "g", ("schmand",), ("g", "cup", "tbsp"), cost=0.006),
    _info("greek yogurt", _D, "g", ("yogurt", "plain yogurt", "joghurt"), ("g", "cup"), cost=0.006),
    _info("cheddar cheese", _D, "g", ("cheddar", "shredded cheddar", "sharp cheddar"),
          ("g", "cup"), cost=0.015),
    _info("parmesan", _D, "g", ("parmesan cheese", "grated parmesan", "parmigiano reggiano"),
          ("g", "cup", "tbsp"), cost=0.03),
    _info("mozzarella", _D, "g", ("mozzarella cheese", "fresh mozzarella"), ("g", "cup"), cost=0.012),
    _info("feta", _D, "g", ("feta cheese",), ("g", "cup"), cost=0.014),
    # Bakery
    _info("bread", _B, "slice", ("white bread", "whole wheat bread", "sourdough bread", "brot"),
          ("slice", "pcs"), cost=0.25),
    _info("tortilla", _B, "pcs", ("tortillas", "flour tortillas", "corn tortillas"), ("pcs",), cost=0.3),
    _info("burger bun", _B, "pcs", ("burger buns", "hamburger buns"), ("pcs",), cost=0.5),
    # Pantry
    _info("all-purpose flour", _PA, "g", ("flour", "plain flour", "wheat flour", "mehl"),
          ("g", "cup", "tbsp"), density=0.53, cost=0.002, staple=True),
    _info("sugar", _PA, "g", ("white sugar", "granulated sugar", "caster sugar", "zucker"),
          ("g", "cup", "tbsp", "tsp"), density=0.85, cost=0.002, staple=True),
    _info("brown sugar", _PA, "g", ("light brown sugar", "dark brown sugar"), ("g", "cup"), cost=0.003),
    _info("rice", _PA, "g", ("white rice", "long grain rice", "basmati rice", "jasmine rice", "reis"),
          ("g", "cup"), cost=0.003),
    _info("pasta", _PA, "g", ("spaghetti", "penne", "fusilli", "linguine", "noodles", "nudeln"),
          ("g", "lb"), cost=0.004),
    _info("olive oil", _PA, "ml", ("extra virgin olive oil", "extra-virgin olive oil", "olivenöl"),
          ("ml", "tbsp", "tsp", "cup"), density=0.91, cost=0.01, staple=True),
    _info("vegetable oil", _PA, "ml", ("canola oil", "sunflower oil", "oil", "cooking oil"),
          ("ml", "tbsp", "cup"), density=0.92, cost=0.004, staple=True),
    _info("chicken broth", _PA, "ml", ("chicken stock", "chicken bouillon"), ("ml", "cup", "l"), cost=0.003),
    _info("canned tomatoes", _PA, "can", ("diced tomatoes", "crushed tomatoes", "tomato puree",
                                          "dosentomaten"), ("can", "g"), cost=1.2),
    _info("black beans", _PA, "can", ("canned black beans",), ("can", "g"), cost=1.0),
    _info("chickpeas", _PA, "can", ("garbanzo beans", "kichererbsen"), ("can", "g"), cost=1.0),
    _info("lentils", _PA, "g", ("red lentils", "green lentils", "linsen"), ("g", "cup"), cost=0.004),
    _info("baking powder", _PA, "tsp", ("backpulver",), ("tsp",), cost=0.05, staple=True),
    _info("baking soda", _PA, "tsp", ("bicarbonate of soda", "natron"), ("tsp",), cost=0.02, staple=True),
    _info("honey", _PA, "tbsp", ("honig",), ("tbsp", "tsp", "ml"), cost=0.25),
    _info("vinegar", _PA, "tbsp", ("white vinegar", "apple cider vinegar", "balsamic vinegar", "essig"),
          ("tbsp", "ml"), cost=0.05, staple=True),
    # Spices & Seasonings
    _info("salt", _S, "tsp", ("sea salt", "kosher salt", "table salt", "salz"),
          ("tsp", "pinch", "g"), cost=0.01, staple=True),
    _info("black pepper", _S, "tsp", ("pepper", "ground black pepper", "freshly ground black pepper",
                                      "pfeffer"), ("tsp", "pinch"), cost=0.05, staple=True),
    _info("paprika", _S, "tsp", ("smoked paprika", "sweet paprika", "paprikapulver"), ("tsp",), cost=0.08),
    _info("cumin", _S, "tsp", ("ground cumin", "cumin seeds", "kreuzkümmel"), ("tsp",), cost=0.08),
    _info("oregano", _S, "tsp", ("dried oregano",), ("tsp",), cost=0.08),
    _info("chili powder", _S, "tsp", ("chilli powder", "chili flakes", "red pepper flakes"), ("tsp",), cost=0.08),
    _info("cinnamon", _S, "tsp", ("ground cinnamon", "zimt"), ("tsp",), cost=0.08),
    _info("garlic powder", _S, "tsp", (), ("tsp",), cost=0.07),
    # Condiments & Sauces
    _info("soy sauce", _C, "tbsp", ("low sodium soy sauce", "sojasauce", "tamari"),
          ("tbsp", "tsp", "ml"), cost=0.1),
    _info("ketchup", _C, "tbsp", ("tomato ketchup",), ("tbsp",), cost=0.05),
    _info("mayonnaise", _C, "tbsp", ("mayo",), ("tbsp", "cup"), cost=0.08),
    _info("dijon mustard", _C, "tbsp", ("mustard", "senf"), ("tbsp", "tsp"), cost=0.1),
    _info("tomato paste", _C, "tbsp", ("tomatenmark",), ("tbsp", "can"), cost=0.1),
    # Frozen
    _info("frozen peas", _F, "g", ("peas", "green peas", "erbsen"), ("g", "cup"), cost=0.005),
    _info("frozen corn", _F, "g", ("corn", "sweet corn", "corn kernels", "mais"), ("g", "cup"), cost=0.005),
    # Beverages
    _info("white wine", _BV, "ml", ("dry white wine", "weißwein"), ("ml", "cup"), cost=0.012),
    _info("coffee", _BV, "g", ("ground coffee", "kaffee"), ("g",), cost=0.02),
    # Snacks
    _info("dark chocolate", _SN, "g", ("chocolate", "chocolate chips", "schokolade"), ("g", "cup"), cost=0.015),
    _info("almonds", _SN, "g", ("almond", "sliced almonds", "mandeln"), ("g", "cup"), cost=0.02),
    _info("walnuts", _SN, "g", ("walnut", "walnüsse"), ("g", "cup"), cost=0.025),
)
