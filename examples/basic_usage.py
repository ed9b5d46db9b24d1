"""Basic usage examples for the f1topic client and renderers."""

from f1topic import F1Client, F1TopicError, fetch_snapshot, is_error_topic, slack_topic


def main() -> None:
    with F1Client(timeout=10.0) as f1:
        # Next race on the calendar
        print("=== Next race ===")
        try:
            event = f1.next_race()
        except F1TopicError as exc:
            print(f"  {exc}")
        else:
            print(f"  Round {event.round}: {event.name} ({event.date})")
            print(f"  {event.race.circuit.circuit_name}")

        # Top of the drivers' championship
        print("\n=== Drivers ===")
        try:
            for standing in f1.driver_standings()[:5]:
                d = standing.driver
                print(f"  {standing.position}. {d.short_name} {d.full_name} - {standing.points:g} pts")
        except F1TopicError as exc:
            print(f"  {exc}")

        # The whole season as a Slack topic
        print("\n=== Slack topic ===")
        snapshot = fetch_snapshot(f1)
        rendered = slack_topic(snapshot, year=2025, fantasy_code="C14SOD0WQ01")
        print(f"  {rendered}")
        if is_error_topic(rendered):
            print("  (topic too long to publish)")
        else:
            print(f"  {len(rendered)}/250 characters")


if __name__ == "__main__":
    main()
