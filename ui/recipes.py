"""
Recipes UI components for the Restaurant Inventory dashboard.
"""
import sys
import os
import logging

from dash import dcc, html, Input, Output, State, callback_context, no_update
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_error_message, create_notice_toasts, create_notice_area, create_form_field,
    to_options, form_text, get_controller
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('recipes_ui')

# Import settings if available
try:
    from config.settings import RECIPE_CATEGORIES
except ImportError:
    RECIPE_CATEGORIES = ["Main Course", "Appetizer", "Dessert", "Side Dish", "Beverage"]

RECIPE_FORM_FIELDS = ["name", "category", "prep_time", "description"]


def create_recipe_form(form):
    return dbc.Form([
        dbc.Row([
            create_form_field("Recipe Name", dbc.Input(id="recipes-form-name", value=form.get("name"))),
            create_form_field("Category", dcc.Dropdown(
                id="recipes-form-category", options=to_options(RECIPE_CATEGORIES),
                value=form.get("category"), clearable=False)),
        ]),
        dbc.Row([
            create_form_field("Prep Time (minutes)", dbc.Input(
                id="recipes-form-prep_time", type="number", min=0, value=form.get("prep_time")), width=4),
            create_form_field("Description", dbc.Textarea(
                id="recipes-form-description", value=form.get("description")), width=8),
        ]),
    ])


def create_recipe_card(recipe):
    return dbc.Card([
        dbc.CardHeader(html.Div([
            html.Strong(recipe.name, className="flex-grow-1"),
            html.I(className="fas fa-star text-warning") if recipe.popular else None,
        ], className="d-flex align-items-center")),
        dbc.CardBody([
            dbc.Badge(recipe.category, color="light", text_color="dark", className="mb-2"),
            html.P(recipe.description, className="small text-muted") if recipe.description else None,
            html.Div([
                html.Small([html.I(className="fas fa-clock me-1"), f"{recipe.prep_time} min"], className="me-3"),
                html.Small([html.I(className="fas fa-list me-1"), f"{recipe.ingredients} ingredients"],
                           className="me-3"),
                html.Small(f"Last used: {recipe.last_used}", className="text-muted"),
            ]),
        ]),
    ], className="shadow-sm h-100")


def create_recipe_cards(controller):
    recipes = controller.visible_recipes()
    if not recipes:
        return html.P(controller.empty_message, className="text-muted text-center py-4")
    return dbc.Row([dbc.Col(create_recipe_card(recipe), md=6, lg=4, className="mb-3") for recipe in recipes])


def create_recipes_tab_content(controller):
    """
    Create content for the recipes tab.

    Args:
        controller: Mounted RecipesController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("recipes-notices"),
        dbc.Row([
            dbc.Col(html.H4("Recipes", className="mb-0"), md=4),
            dbc.Col(dbc.Input(id="recipes-search", placeholder="Search recipes...",
                              debounce=True, value=controller.search_term), md=4),
            dbc.Col(dbc.Button([html.I(className="fas fa-plus me-2"), "Add Recipe"],
                               id="recipes-add-button", color="primary"), md=4, className="text-end"),
        ], className="mb-3", align="center"),
        dbc.Tabs([
            dbc.Tab(label="All Recipes", tab_id="all"),
            dbc.Tab(label="Popular", tab_id="popular"),
            dbc.Tab(label="Main Courses", tab_id="main"),
            dbc.Tab(label="Appetizers", tab_id="appetizers"),
            dbc.Tab(label="Desserts", tab_id="desserts"),
        ], id="recipes-tabs", active_tab=controller.active_tab, className="mb-3"),
        html.Div(id="recipes-cards", children=create_recipe_cards(controller)),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("Add Recipe")),
            dbc.ModalBody(id="recipes-form-body", children=create_recipe_form(controller.form)),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="recipes-cancel-button", color="secondary", outline=True),
                dbc.Button("Add Recipe", id="recipes-save-button", color="primary"),
            ]),
        ], id="recipes-modal", is_open=False),
    ])


def register_recipes_callbacks(app):
    """
    Register recipe-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("recipes-cards", "children"),
            Output("recipes-notices", "children"),
            Output("recipes-modal", "is_open"),
            Output("recipes-form-body", "children"),
        ],
        [
            Input("recipes-search", "value"),
            Input("recipes-tabs", "active_tab"),
            Input("recipes-add-button", "n_clicks"),
            Input("recipes-cancel-button", "n_clicks"),
            Input("recipes-save-button", "n_clicks"),
        ],
        [State("session-id", "data")] + [State(f"recipes-form-{field}", "value") for field in RECIPE_FORM_FIELDS],
        prevent_initial_call=True
    )
    def update_recipes(search, active_tab, add_clicks, cancel_clicks, save_clicks, session_id, *form_values):
        """Handle every interaction on the recipes screen"""
        controller = get_controller(app, session_id, "recipes")
        triggered = callback_context.triggered_id
        modal_open, form_body = no_update, no_update

        try:
            if triggered == "recipes-search":
                controller.set_search(search)
            elif triggered == "recipes-tabs":
                controller.set_tab(active_tab)
            elif triggered == "recipes-add-button":
                controller.open_form()
                modal_open = True
                form_body = create_recipe_form(controller.form)
            elif triggered == "recipes-cancel-button":
                controller.close_form()
                modal_open = False
            elif triggered == "recipes-save-button":
                controller.update_form(**{
                    field: form_text(value) for field, value in zip(RECIPE_FORM_FIELDS, form_values)
                })
                controller.add_recipe()
                modal_open = controller.form_open

            return (
                create_recipe_cards(controller),
                create_notice_toasts(controller.drain_notices()),
                modal_open,
                form_body,
            )
        except Exception as e:
            logger.error(f"Error updating recipes: {str(e)}", exc_info=True)
            return no_update, create_error_message(f"Error updating recipes: {str(e)}"), no_update, no_update
