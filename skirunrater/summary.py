# skirunrater/summary.py
from collections import defaultdict

BANDS = (
    (0, 999, "< 1000 ft"),
    (1000, 1999, "1000-1999 ft"),
    (2000, 2999, "2000-2999 ft"),
)
TOP_BAND = "3000+ ft"


def band_for(vertical):
    if vertical < BANDS[0][0]:
        return BANDS[0][2]
    for low, high, label in BANDS:
        if low <= vertical <= high:
            return label
    return TOP_BAND


def vertical_bands(runs):
    """Group runs by vertical band, keeping collection order inside each band."""
    bands = defaultdict(list)
    for r in runs:
        bands[band_for(r.vertical)].append(r)
    return dict(bands)


def print_run_table(runs):
    if not runs:
        print("No ski runs found.")
        return
    print(f"{'ID':>5}  {'Name':<30} {'Vertical(ft)':>12}")
    for r in runs:
        print(f"{r.id:>5}  {r.name[:30]:<30} {r.vertical:>12}")


def summarize_runs(runs):
    if not runs:
        print("No ski runs found.")
        return

    verticals = [r.vertical for r in runs]
    total = sum(verticals)
    avg = total / len(verticals)

    print(f"Summary of {len(runs)} runs:")
    print(f"  Total vertical: {total} ft")
    print(f"  Shortest: {min(verticals)} ft")
    print(f"  Longest: {max(verticals)} ft")
    print(f"  Average: {avg:.1f} ft")

    bands = vertical_bands(runs)
    for label in [b[2] for b in BANDS] + [TOP_BAND]:
        members = bands.get(label, [])
        print(f"\n{label}: {len(members)}")
        for r in members:
            print(f"  - {r.name} (id={r.id}): {r.vertical} ft")
