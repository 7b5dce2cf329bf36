import argparse
import sys
from dotenv import load_dotenv

load_dotenv()

from rich import print
from rich.markup import escape
from ai import gemini
from core.config import load_settings
from core.errors import GuideError
from services.amenities import amenity_icon


def main(argv=None) -> int:
    settings = load_settings()
    p = argparse.ArgumentParser(description="Generate a travel guide in the terminal.")
    p.add_argument("--destination", "--dest", required=True)
    p.add_argument("--origin", required=True)
    p.add_argument("--language", default=settings.default_language)
    args = p.parse_args(argv)

    print("[cyan]→ Generating guide…[/]")
    try:
        model = gemini.get_model(settings.gemini_api_key, settings.gemini_model)
        guide = gemini.generate_travel_guide(model, args.destination, args.origin, args.language)
    except GuideError as e:
        print(f"[red]{e.message}[/]")
        return 1
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/]")
        return 1

    print(f"\n[bold]{escape(guide.destination_name)}[/] — {escape(guide.tagline)}")
    print(escape(guide.description))
    print(f"[yellow]Best time:[/] {escape(guide.best_time_to_visit)}   [yellow]Currency:[/] {escape(guide.currency)}")
    print(f"\n[bold]History[/]\n{escape(guide.history)}")

    print("\n[bold]Routes[/]")
    for r in guide.routes:
        print(escape(f"  ({r.category}) {r.mode}: {r.duration}, {r.cost_estimate}"))

    print("\n[bold]Hotels[/]")
    for h in guide.hotels:
        amenities = ", ".join(f"{amenity_icon(a).glyph} {a}" for a in h.amenities)
        print(escape(f"  ({h.category}) {h.name} ({h.rating}) {h.price_estimate} / night  {amenities}"))

    print("\n[bold]Attractions[/]")
    for a in guide.top_attractions:
        print(escape(f"  {a.name} ({a.type}, best {a.best_time})"))

    print("\n[bold]Food[/]")
    for d in guide.culinary_delights:
        print(escape(f"  ({d.category}) {d.name} @ {d.best_place_to_try} {d.price_range}"))

    if guide.travel_tips:
        print("\n[bold]Tips[/]")
        for tip in guide.travel_tips:
            print(escape(f"  • {tip}"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
