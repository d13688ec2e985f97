from flask import Blueprint, request, jsonify

from ..services.container import services

recipes_bp = Blueprint('recipes', __name__, url_prefix="/api/recipes")


@recipes_bp.get("/search")
def search():
    """Free-text recipe search"""
    query = request.args.get("query", "").strip()
    if not query:
        return jsonify({"error": "missing_query", "msg": "parameter 'query' required"}), 400

    number = request.args.get("number", 5, type=int)
    results = services().recipe_client().search_recipes(
        query,
        diet=request.args.get("diet") or None,
        cuisine=request.args.get("cuisine") or None,
        number=number,
    )
    return jsonify({"results": results})


@recipes_bp.get("/by-ingredients")
def by_ingredients():
    """Recipes that use the given comma-separated ingredients"""
    ingredients = request.args.get("ingredients", "").strip()
    if not ingredients:
        return jsonify({"error": "missing_ingredients", "msg": "parameter 'ingredients' required"}), 400

    number = request.args.get("number", 6, type=int)
    return jsonify({"results": services().recipe_client().search_by_ingredients(ingredients, number)})


@recipes_bp.get("/<int:recipe_id>")
def details(recipe_id: int):
    info = services().recipe_client().get_recipe_information(recipe_id)
    if info is None:
        return jsonify({"error": "not_found", "msg": f"recipe {recipe_id} not available"}), 404
    return jsonify(info)
