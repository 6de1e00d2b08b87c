"""
Script to populate the recipe catalog with sample recipes for local development.

Usage:
    python -m scripts.seed_recipes
"""

import asyncio
from typing import List
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from loguru import logger

from recipes_api.database.stores import BeanieRecipeStore
from recipes_api.models import DOCUMENT_MODELS, Recipe, RecipeDocument, new_recipe_id
from config.settings import settings


SAMPLE_RECIPES = [
    {
        "title": "Shakshuka",
        "ingredients": ["4 eggs", "1 can crushed tomatoes", "1 onion", "1 red pepper", "2 cloves garlic", "cumin", "paprika"],
        "instructions": [
            "Saute onion and pepper until soft",
            "Add garlic and spices, cook for one minute",
            "Pour in tomatoes and simmer for 10 minutes",
            "Crack eggs into wells and cover until set",
        ],
        "image_links": "",
    },
    {
        "title": "Lemon Garlic Pasta",
        "ingredients": ["200g spaghetti", "1 lemon", "3 cloves garlic", "olive oil", "parmesan"],
        "instructions": [
            "Boil pasta in salted water",
            "Warm garlic in olive oil",
            "Toss pasta with oil, lemon zest and juice",
            "Finish with parmesan",
        ],
        "image_links": "",
    },
    {
        "title": "Overnight Oats",
        "ingredients": ["1/2 cup oats", "1/2 cup milk", "1/4 cup yogurt", "1 tbsp chia seeds", "honey"],
        "instructions": ["Mix everything in a jar", "Refrigerate overnight"],
        "image_links": "",
    },
]


def build_recipes(author_id: str) -> List[Recipe]:
    """Build sample recipes owned by ``author_id``."""
    return [Recipe(id=new_recipe_id(), author_id=author_id, **sample) for sample in SAMPLE_RECIPES]


async def main(author_id: str = "seed-author", clear_existing: bool = False):
    """Main function."""
    logger.info(f"Connecting to MongoDB database '{settings.mongodb_db_name}'")
    client = AsyncIOMotorClient(settings.mongo_uri)
    db = client[settings.mongodb_db_name]

    await init_beanie(
        database=db,
        document_models=DOCUMENT_MODELS,
    )

    if clear_existing:
        await RecipeDocument.delete_all()
        logger.info("Cleared existing recipes")

    store = BeanieRecipeStore(timeout=settings.request_timeout_seconds)
    for recipe in build_recipes(author_id):
        created = await store.insert(recipe)
        logger.info(f"Inserted recipe {created.id}: {created.title}")

    logger.success(f"Seeded {len(SAMPLE_RECIPES)} recipes")
    client.close()


if __name__ == "__main__":
    asyncio.run(main())
