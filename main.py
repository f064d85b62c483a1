"""
main.py
-------
Interactive terminal run of the packing wizard.

Screens: Trip Details → Activities → Weather Forecast → Packing List.
Commands on every screen: `next`, `back`, `quit`; plus screen-specific ones
listed in the prompt.

Run:
    python main.py
"""

from __future__ import annotations
import asyncio
import logging
from datetime import date

from modules.errors import PackingPlannerError, ValidationError
from modules.search.destination_search import DestinationSearch
from modules.wizard.controller import WizardController, WizardStep
import config


async def ask(prompt: str) -> str:
    line = await asyncio.to_thread(input, prompt)
    return line.strip()


def _parse_date(text: str) -> date | None:
    try:
        return date.fromisoformat(text)
    except ValueError:
        print(f"  ⚠  Not a YYYY-MM-DD date: {text!r}")
        return None


def show(wizard: WizardController) -> None:
    snap = wizard.snapshot()
    print(f"\n=== Step {int(snap.step)}/4 · {snap.step.title} ===")
    if snap.step == WizardStep.PLANNING:
        print(f"  Destination: {snap.destination or '-'}")
        print(f"  Dates:       {snap.start_date or '-'} → {snap.end_date or '-'}  {snap.duration_label}")
    elif snap.step == WizardStep.CONFIRM:
        print(f"  {snap.destination} · {snap.start_date} → {snap.end_date} ({snap.duration_label})")
        if not snap.activities:
            print("  No activities yet.")
        for i, activity in enumerate(snap.activities):
            print(f"  [{i}] {activity}")
    elif snap.step == WizardStep.FORECAST:
        for day in snap.forecast_set or ():
            print(f"  {day.date}  {day.high_f}°F / {day.low_f}°F  {day.conditions.value}")
        if snap.forecast_is_stale:
            print("  ⚠  Trip dates changed since this forecast was generated.")
    else:
        for category, items in snap.packing_list.by_category().items():
            print(f"  {category.value}")
            for item in items:
                qty = f" ×{item.quantity}" if item.quantity > 1 else ""
                print(f"    ☐ {item.name}{qty}")
        if snap.packing_is_stale:
            print("  ⚠  Trip changed since this list was generated.")


async def edit_trip(wizard: WizardController, cmd: str, arg: str) -> None:
    if cmd == "dest":
        wizard.update_destination(arg)
        if wizard.search is not None:
            await wizard.search.wait_idle()
            for i, s in enumerate(wizard.suggestions):
                print(f"  ({i}) {s}")
    elif cmd == "pick" and arg.isdigit() and int(arg) < len(wizard.suggestions):
        wizard.select_destination(wizard.suggestions[int(arg)])
    elif cmd == "dates":
        parts = arg.split()
        if len(parts) == 2:
            start, end = _parse_date(parts[0]), _parse_date(parts[1])
            if start and end:
                wizard.update_dates(start, end)
        else:
            print("Usage: dates <start YYYY-MM-DD> <end YYYY-MM-DD>")
    elif cmd == "add":
        if not wizard.add_activity(arg):
            print("Usage: add <activity>")
    elif cmd == "rm" and arg.isdigit():
        try:
            wizard.remove_activity(int(arg))
        except IndexError as e:
            print(f"  ⚠  {e}")
    else:
        print("Unknown command.")


_PROMPTS = {
    WizardStep.PLANNING: "dest <text> | pick <n> | dates <start> <end> | next | quit",
    WizardStep.CONFIRM:  "add <activity> | rm <n> | next | back | quit",
    WizardStep.FORECAST: "next | back | quit",
    WizardStep.PACKING:  "back | restart | quit",
}


async def interactive_loop() -> None:
    print("=== 🧳 Smart Travel Packing ===")
    wizard = WizardController(search=DestinationSearch())

    try:
        while True:
            show(wizard)
            line = await ask(f"\n{_PROMPTS[wizard.step]}\n> ")
            cmd, _, arg = line.partition(" ")
            cmd = cmd.lower()

            try:
                if cmd == "quit":
                    break
                elif cmd == "next":
                    if wizard.step in (WizardStep.CONFIRM, WizardStep.FORECAST):
                        print("⏳ Generating…")
                    await wizard.advance()
                elif cmd == "back":
                    wizard.back()
                elif cmd == "restart":
                    wizard.reset()
                elif cmd:
                    await edit_trip(wizard, cmd, arg.strip())
            except ValidationError as e:
                print(f"🛑 {e}")
            except PackingPlannerError as e:
                print(f"❌ Error: {e}")
    finally:
        if wizard.search is not None:
            await wizard.search.aclose()


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    asyncio.run(interactive_loop())
