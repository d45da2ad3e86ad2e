"""Plain-text views of the food log."""

from nutriai.domain.foods import DailyTargets, FoodEntry, sum_entries

REPORT_TITLE = "=== NUTRIAI LOG ==="


def targets_line(targets: DailyTargets) -> str:
    """Return the one-line summary of daily goals."""
    return (
        f"{targets.calories} kcal • {targets.protein_g}g P • "
        f"{targets.fat_g}g F • {targets.carbs_g}g C"
    )


def entry_row(entry: FoodEntry) -> tuple[str, str, str]:
    """Return (name, portion, macros) display strings for one entry."""
    return (
        entry.name,
        f"{int(entry.grams)}g",
        f"{entry.calories}k | P{entry.protein} F{entry.fat} C{entry.carb}",
    )


def export_text(daily: list[FoodEntry], targets: DailyTargets) -> str:
    """Return the clipboard report for the open day."""
    totals = sum_entries(daily)
    lines = [
        REPORT_TITLE,
        f"Calories: {totals.calories} / {targets.calories}",
        f"Protein: {totals.protein}g / {targets.protein_g}g",
        f"Fat: {totals.fat}g / {targets.fat_g}g",
        f"Carbs: {totals.carb}g / {targets.carbs_g}g",
        "",
        "Foods:",
    ]
    lines.extend(
        f"• {entry.name} {float(entry.grams)}g → {entry.calories}kcal"
        for entry in daily
    )
    return "\n".join(lines)
