"""Recipe API tests."""


def test_create_recipe(client, auth_headers):
    """Test creating a recipe with ingredients."""
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={
            "title": "Pasta Carbonara",
            "description": "Classic Italian pasta",
            "servings": 4,
            "cooking_time": 20,
            "cuisine": "Italian",
            "instructions": ["Boil pasta", "Whisk eggs and cheese", "Combine"],
            "ingredients": [
                {"name": "Spaghetti", "quantity": "1 lb"},
                {"name": " Eggs ", "quantity": "4"},
                {"name": "Parmesan", "quantity": "1 cup"},
            ],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Pasta Carbonara"
    assert data["status"] == "pending"
    assert data["author_id"] == auth_headers.user_id
    assert data["instructions"] == ["Boil pasta", "Whisk eggs and cheese", "Combine"]
    assert [i["name"] for i in data["ingredients"]] == ["Spaghetti", "Eggs", "Parmesan"]
    assert data["ingredients"][1]["normalized_name"] == "eggs"


def test_list_recipes_shows_own_pending(client, auth_headers):
    """Authors see their own pending recipes."""
    client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Draft", "ingredients": [{"name": "Onion"}]},
    )

    response = client.get("/api/v1/recipes", headers=auth_headers)
    assert response.status_code == 200
    recipes = response.json()
    assert len(recipes) == 1
    assert recipes[0]["title"] == "Draft"
    assert recipes[0]["ingredient_count"] == 1


def test_pending_recipe_hidden_from_others(client, auth_headers, other_headers):
    """Pending recipes are invisible to other users until approved."""
    recipe_id = client.post(
        "/api/v1/recipes", headers=auth_headers, json={"title": "Secret"}
    ).json()["id"]

    assert client.get("/api/v1/recipes", headers=other_headers).json() == []
    response = client.get(f"/api/v1/recipes/{recipe_id}", headers=other_headers)
    assert response.status_code == 404


def test_approved_recipe_visible_to_others(client, other_headers, publish_recipe):
    """Approved recipes are in everyone's catalog."""
    recipe_id = publish_recipe("Pancakes", ["egg", "flour", "milk"])

    recipes = client.get("/api/v1/recipes", headers=other_headers).json()
    assert [r["id"] for r in recipes] == [recipe_id]
    assert recipes[0]["status"] == "approved"

    response = client.get(f"/api/v1/recipes/{recipe_id}", headers=other_headers)
    assert response.status_code == 200


def test_approve_requires_admin(client, auth_headers):
    """Regular users cannot approve recipes."""
    recipe_id = client.post(
        "/api/v1/recipes", headers=auth_headers, json={"title": "Mine"}
    ).json()["id"]

    response = client.post(f"/api/v1/recipes/{recipe_id}/approve", headers=auth_headers)
    assert response.status_code == 403


def test_approve_missing_recipe(client, admin_headers):
    """Approving an unknown recipe is a 404."""
    response = client.post("/api/v1/recipes/99999/approve", headers=admin_headers)
    assert response.status_code == 404


def test_list_recipe_filters(client, auth_headers, publish_recipe):
    """Search, cuisine and cooking time filters narrow the list."""
    publish_recipe("Quick Stir Fry", ["broccoli"], cuisine="Chinese", cooking_time=15)
    publish_recipe("Slow Ragu", ["beef"], cuisine="Italian", cooking_time=180)
    publish_recipe(
        "Pasta Salad",
        ["pasta"],
        cuisine="italian",
        cooking_time=20,
        description="A quick summer side",
    )

    def titles(**params):
        response = client.get("/api/v1/recipes", headers=auth_headers, params=params)
        assert response.status_code == 200
        return sorted(r["title"] for r in response.json())

    assert titles(search="QUICK") == ["Pasta Salad", "Quick Stir Fry"]
    assert titles(cuisine="Italian") == ["Pasta Salad", "Slow Ragu"]
    assert titles(max_cooking_time=20) == ["Pasta Salad", "Quick Stir Fry"]
    assert titles(cuisine="italian", max_cooking_time=60) == ["Pasta Salad"]


def test_update_recipe(client, auth_headers):
    """Test updating recipe metadata."""
    recipe_id = client.post(
        "/api/v1/recipes", headers=auth_headers, json={"title": "Old Title"}
    ).json()["id"]

    response = client.put(
        f"/api/v1/recipes/{recipe_id}",
        headers=auth_headers,
        json={"title": "New Title", "servings": 6, "dietary_restrictions": ["vegetarian"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "New Title"
    assert data["servings"] == 6
    assert data["dietary_restrictions"] == ["vegetarian"]


def test_only_author_can_update(client, other_headers, publish_recipe):
    """Other users get 403 when modifying a recipe they can see."""
    recipe_id = publish_recipe("Shared", ["egg"])

    response = client.put(
        f"/api/v1/recipes/{recipe_id}", headers=other_headers, json={"title": "Hijacked"}
    )
    assert response.status_code == 403

    response = client.delete(f"/api/v1/recipes/{recipe_id}", headers=other_headers)
    assert response.status_code == 403


def test_delete_recipe(client, auth_headers):
    """Test soft deleting a recipe."""
    recipe_id = client.post(
        "/api/v1/recipes", headers=auth_headers, json={"title": "To Delete"}
    ).json()["id"]

    response = client.delete(f"/api/v1/recipes/{recipe_id}", headers=auth_headers)
    assert response.status_code == 204

    recipes = client.get("/api/v1/recipes", headers=auth_headers).json()
    assert not any(r["id"] == recipe_id for r in recipes)
    assert client.get(f"/api/v1/recipes/{recipe_id}", headers=auth_headers).status_code == 404


def test_add_ingredient_appends_in_order(client, auth_headers):
    """New ingredients go to the end of the recipe's list."""
    recipe_id = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Test Recipe", "ingredients": [{"name": "Flour"}]},
    ).json()["id"]

    response = client.post(
        f"/api/v1/recipes/{recipe_id}/ingredients",
        headers=auth_headers,
        json={"name": "Salt", "quantity": "1 tsp"},
    )
    assert response.status_code == 201
    assert response.json()["quantity"] == "1 tsp"

    recipe = client.get(f"/api/v1/recipes/{recipe_id}", headers=auth_headers).json()
    assert [i["name"] for i in recipe["ingredients"]] == ["Flour", "Salt"]


def test_update_ingredient(client, auth_headers):
    """Renaming an ingredient updates its normalized name."""
    ingredient_id = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Test", "ingredients": [{"name": "Old Name", "quantity": "1"}]},
    ).json()["ingredients"][0]["id"]

    response = client.put(
        f"/api/v1/recipes/ingredients/{ingredient_id}",
        headers=auth_headers,
        json={"name": "Brown SUGAR", "quantity": "2"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Brown SUGAR"
    assert response.json()["normalized_name"] == "brown sugar"
    assert response.json()["quantity"] == "2"


def test_blank_ingredient_names_rejected(client, auth_headers):
    """Whitespace-only ingredient names are a bad request on every write path."""
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Blank", "ingredients": [{"name": "Salt"}, {"name": "   "}]},
    )
    assert response.status_code == 400
    assert client.get("/api/v1/recipes", headers=auth_headers).json() == []

    created = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Soup", "ingredients": [{"name": "Water"}]},
    ).json()

    response = client.post(
        f"/api/v1/recipes/{created['id']}/ingredients", headers=auth_headers, json={"name": "  "}
    )
    assert response.status_code == 400

    ingredient_id = created["ingredients"][0]["id"]
    response = client.put(
        f"/api/v1/recipes/ingredients/{ingredient_id}", headers=auth_headers, json={"name": "\t "}
    )
    assert response.status_code == 400

    recipe = client.get(f"/api/v1/recipes/{created['id']}", headers=auth_headers).json()
    assert [i["name"] for i in recipe["ingredients"]] == ["Water"]


def test_delete_ingredient(client, auth_headers):
    """Test deleting an ingredient."""
    created = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Test", "ingredients": [{"name": "Salt"}, {"name": "Pepper"}]},
    ).json()
    ingredient_id = created["ingredients"][0]["id"]

    response = client.delete(f"/api/v1/recipes/ingredients/{ingredient_id}", headers=auth_headers)
    assert response.status_code == 204

    recipe = client.get(f"/api/v1/recipes/{created['id']}", headers=auth_headers).json()
    assert [i["name"] for i in recipe["ingredients"]] == ["Pepper"]


def test_cannot_edit_other_users_ingredient(client, other_headers, auth_headers):
    """Ingredients of someone else's recipe are not found."""
    ingredient_id = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Mine", "ingredients": [{"name": "Salt"}]},
    ).json()["ingredients"][0]["id"]

    response = client.put(
        f"/api/v1/recipes/ingredients/{ingredient_id}",
        headers=other_headers,
        json={"name": "Sugar"},
    )
    assert response.status_code == 404


# --- Search by ingredients ---


def test_search_by_ingredients_ranks_matches(client, auth_headers, publish_recipe):
    """Recipes are ranked by coverage with missing ingredients listed."""
    pancakes = publish_recipe("Pancakes", ["Egg", "Flour", "Milk"])
    omelette = publish_recipe("Omelette", ["egg", "butter"])
    publish_recipe("Lemonade", ["lemon", "sugar"])

    response = client.post(
        "/api/v1/recipes/search-by-ingredients",
        headers=auth_headers,
        json={"ingredients": ["EGG", " flour "]},
    )
    assert response.status_code == 200
    results = response.json()
    assert [r["recipe"]["id"] for r in results] == [pancakes, omelette]
    assert results[0]["match_percentage"] == 67
    assert results[0]["missing_ingredients"] == ["Milk"]
    assert results[1]["match_percentage"] == 50
    assert results[1]["missing_ingredients"] == ["butter"]


def test_search_ignores_pending_recipes(client, auth_headers):
    """Only approved recipes are candidates."""
    client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Draft", "ingredients": [{"name": "egg"}]},
    )

    response = client.post(
        "/api/v1/recipes/search-by-ingredients",
        headers=auth_headers,
        json={"ingredients": ["egg"]},
    )
    assert response.status_code == 200
    assert response.json() == []


def test_search_with_no_ingredients(client, auth_headers, publish_recipe):
    """An empty ingredient list yields no recommendations."""
    publish_recipe("Pancakes", ["egg"])

    response = client.post(
        "/api/v1/recipes/search-by-ingredients",
        headers=auth_headers,
        json={"ingredients": []},
    )
    assert response.status_code == 200
    assert response.json() == []


def test_search_respects_limit(client, auth_headers, publish_recipe):
    """The limit truncates the ranked list."""
    first = publish_recipe("A", ["egg"])
    publish_recipe("B", ["egg", "milk"])
    publish_recipe("C", ["egg", "milk", "flour"])

    response = client.post(
        "/api/v1/recipes/search-by-ingredients",
        headers=auth_headers,
        json={"ingredients": ["egg"], "limit": 1},
    )
    assert [r["recipe"]["id"] for r in response.json()] == [first]


def test_search_skips_recipes_without_ingredients(client, auth_headers, publish_recipe):
    """Approved recipes with no ingredients are never recommended."""
    publish_recipe("Empty", [])
    salad = publish_recipe("Salad", ["lettuce"])

    response = client.post(
        "/api/v1/recipes/search-by-ingredients",
        headers=auth_headers,
        json={"ingredients": ["lettuce"]},
    )
    assert [r["recipe"]["id"] for r in response.json()] == [salad]
