import io
from typing import Callable, Optional

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from grocer.domain.GroceryList import GroceryList
from grocer.domain.MealPlan import MealPlan

HEADER_COLOR = colors.HexColor("#4CAF50")


def _styled_table(data):
    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 11),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    return table


def _format_quantity(quantity) -> str:
    if float(quantity) == int(quantity):
        return str(int(quantity))
    return f"{quantity:g}"


def generate_pdf_for_grocery_list(plan: MealPlan, grocery_list: GroceryList,
                                  recipe_title: Optional[Callable[[str], str]] = None) -> bytes:
    """Render the plan's meals and its aggregated grocery list as a printable PDF."""
    title_for = recipe_title or (lambda recipe_id: recipe_id)
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    plan_dict = plan.to_dict()
    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Grocery List: {plan_dict['start_date']} to {plan_dict['end_date']}", styles["Title"]),
        Spacer(1, 12),
        Paragraph("Meals", styles["Heading2"]),
    ]

    meals = [["Date", "Meal", "Recipe", "Servings"]]
    for entry in plan_dict["entries"]:
        meals.append([entry["date"], entry["meal_type"] or "-", title_for(entry["recipe_id"]), str(entry["servings"])])
    elements.append(_styled_table(meals))
    elements.extend([Spacer(1, 16), Paragraph("Ingredients", styles["Heading2"])])

    rows = [["Ingredient", "Quantity", "Unit"]]
    for line in grocery_list.ingredients:
        rows.append([line.ingredient, _format_quantity(line.quantity), line.unit])
    elements.append(_styled_table(rows))

    doc.build(elements)
    return buf.getvalue()
