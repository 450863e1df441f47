DEFAULT_INTENSITY = "regular"

DEFAULT_TOTAL_SECONDS = 5 * 60

DEFAULT_MIN_SECONDS = 6

# Nominal weight for entries without a base
DEFAULT_BASE_SECONDS = 30

# Nominal count for rep-based entries without a base
DEFAULT_REPS = 10


def _ex(name, base, slug, unit="time", notes=""):
    return {"name": name, "base": base, "unit": unit, "slug": slug, "notes": notes}


DEFAULT_POOLS = {
    "chill": [
        _ex("Neck rolls", 20, "neck-rolls"),
        _ex("Shoulder shrugs", 20, "shoulder-shrugs"),
        _ex("Ankle circles", 18, "ankle-circles"),
        _ex("Wrist circles", 15, "wrist-circles"),
        _ex("Seated cat-cow", 30, "seated-cat-cow"),
        _ex("Child's pose", 40, "childs-pose"),
        _ex("Seated forward fold", 30, "seated-forward-fold"),
        _ex("Calf stretch", 25, "calf-stretch"),
        _ex("Hip circles", 20, "hip-circles"),
        _ex("Knee hugs", 20, "knee-hugs"),
        _ex("Supine knee rock", 20, "supine-knee-rock"),
        _ex("Hamstring pedal (gentle)", 20, "hamstring-pedal"),
        _ex("Seated shoulder stretch", 18, "seated-shoulder-stretch"),
        _ex("Thoracic rotation (seated)", 22, "thoracic-rotation"),
        _ex("Ankle dorsiflexor mobility", 18, "ankle-dorsiflexor-mobility"),
        _ex("Breathing focus", 30, "breathing-focus"),
        _ex("Seated side bend", 22, "seated-side-bend"),
        _ex("Gentle torso twist", 20, "gentle-torso-twist"),
        _ex("Neck side stretch", 18, "neck-side-stretch"),
        _ex("Wrist flexor stretch", 15, "wrist-flexor-stretch"),
    ],
    "stretch": [
        _ex("Hamstring stretch", 40, "hamstring-stretch"),
        _ex("Quad stretch", 40, "quad-stretch"),
        _ex("Butterfly stretch", 35, "butterfly-stretch"),
        _ex("Pigeon prep", 35, "pigeon-prep"),
        _ex("Glute stretch", 30, "glute-stretch"),
        _ex("Adductor stretch", 30, "adductor-stretch"),
        _ex("Lying quad release", 30, "lying-quad-release"),
        _ex("Torso twist", 30, "torso-twist"),
        _ex("Chest opener", 25, "chest-opener"),
        _ex("Triceps stretch", 20, "triceps-stretch"),
        _ex("Seated spinal twist", 30, "seated-spinal-twist"),
        _ex("Standing calf stretch", 25, "standing-calf-stretch"),
        _ex("Hamstring hold", 30, "hamstring-hold"),
        _ex("World's greatest stretch", 40, "worlds-greatest-stretch"),
        _ex("IT band lean", 25, "it-band-lean"),
        _ex("Hip opener (kneeling)", 30, "hip-opener-kneeling"),
        _ex("Figure-4 lying", 30, "figure4-lying"),
        _ex("Shoulder cross-body", 20, "shoulder-cross-body"),
        _ex("Neck mobility hold", 18, "neck-mobility-hold"),
        _ex("Wrist mobility stretch", 15, "wrist-mobility-stretch"),
    ],
    "regular": [
        _ex("Bodyweight squats", 30, "bodyweight-squats"),
        _ex("Incline push-ups", 28, "incline-push-ups"),
        _ex("Alternating lunges", 30, "alternating-lunges"),
        _ex("Plank (forearms)", 40, "plank-forearms"),
        _ex("Glute bridge", 30, "glute-bridge"),
        _ex("Standing knee lifts", 25, "standing-knee-lifts"),
        _ex("Calf raises", 25, "calf-raises"),
        _ex("Side lunges", 28, "side-lunges"),
        _ex("Supermans", 24, "supermans"),
        _ex("Reverse lunges", 28, "reverse-lunges"),
        _ex("Bird-dog", 24, "bird-dog"),
        _ex("Step ups (low)", 28, "step-ups-low"),
        _ex("Tricep dips (chair)", 26, "tricep-dips-chair"),
        _ex("Heel taps", 24, "heel-taps"),
        _ex("Hip bridges with march", 26, "hip-bridges-march"),
        _ex("Standing oblique crunch", 24, "standing-oblique-crunch"),
        _ex("Wall sits", 30, "wall-sits"),
        _ex("Tabletop leg lifts", 24, "tabletop-leg-lifts"),
        _ex("Reverse fly (bodyweight)", 22, "reverse-fly-bodyweight"),
        _ex("Deadbug core", 24, "deadbug-core"),
    ],
    "intense": [
        _ex("Mountain climbers", 28, "mountain-climbers"),
        _ex("Jump squats (modified)", 26, "jump-squats-modified"),
        _ex("Plank shoulder taps", 26, "plank-shoulder-taps"),
        _ex("High knees", 30, "high-knees"),
        _ex("Burpees (half)", 28, "burpees-half"),
        _ex("Speed skaters", 26, "speed-skaters"),
        _ex("Fast alternating lunges", 26, "fast-alternating-lunges"),
        _ex("Bicycle crunches", 28, "bicycle-crunches"),
        _ex("Tuck jump (low)", 22, "tuck-jump-low"),
        _ex("Plank jacks (low)", 26, "plank-jacks-low"),
        _ex("Skips without rope", 24, "skips-without-rope"),
        _ex("Explosive push-up (knee mod)", 22, "explosive-pushup-knee"),
        _ex("Alternating jump lunges", 26, "alternating-jump-lunges"),
        _ex("Fast squat pulses", 24, "fast-squat-pulses"),
        _ex("Russian twists (fast)", 26, "russian-twists-fast"),
        _ex("Mountain climber hold", 28, "mountain-climber-hold"),
        _ex("Climber bursts", 26, "climber-bursts"),
        _ex("Star jumps (low)", 22, "star-jumps-low"),
        _ex("Heel flicks", 24, "heel-flicks"),
        _ex("Explosive step-ups", 24, "explosive-step-ups"),
    ],
    "hardcore": [
        _ex("Burpees (modified)", 30, "burpees-modified"),
        _ex("Plyo lunges", 28, "plyo-lunges"),
        _ex("Pistol squat (assisted)", 30, "pistol-squat-assisted"),
        _ex("Tuck jumps", 26, "tuck-jumps"),
        _ex("Explosive mountain climbers", 28, "explosive-mountain-climbers"),
        _ex("One-leg hip thrust", 28, "one-leg-hip-thrust"),
        _ex("Clap push-ups (mod)", 26, "clap-pushups-mod"),
        _ex("Single-leg plyo hops", 26, "single-leg-plyo-hops"),
        _ex("Sprint-in-place", 30, "sprint-in-place"),
        _ex("L-sit hold (mod)", 24, "l-sit-hold-mod"),
        _ex("Aztec push-ups (mod)", 24, "aztec-pushups-mod"),
        _ex("All-out squat jumps", 26, "all-out-squat-jumps"),
        _ex("Explosive plank taps", 24, "explosive-plank-taps"),
        _ex("Plyo push-up (mod)", 24, "plyo-pushup-mod"),
        _ex("Box jump substitute", 24, "box-jump-substitute"),
        _ex("Weighted-ish squat pulses", 26, "weightedish-squat-pulses"),
        _ex("Heavy core rotations", 26, "heavy-core-rotations"),
        _ex("Burpee tuck", 26, "burpee-tuck"),
        _ex("One-arm plank (mod)", 24, "one-arm-plank-mod"),
        _ex("Aztec hold (mod)", 22, "aztec-hold-mod"),
    ],
}

DEFAULT_COOLDOWN_POOL = [
    _ex("Deep breaths", 30, "deepbreaths", notes="Slow nasal breathing"),
    _ex("Standing side bend", 20, "standingsidebend"),
    _ex("Child's pose", 30, "childpose"),
    _ex("Standing quad stretch", 20, "standing-quad-stretch"),
    _ex("Forward fold", 25, "forward-fold"),
    _ex("Chest opener", 20, "chest-opener"),
    _ex("Calf stretch", 20, "calf-stretch"),
    _ex("Neck side stretch", 15, "neck-side-stretch"),
]

# count: main exercises picked per routine
# cooldown_count / cooldown_seconds: 0 disables the cooldown block
DEFAULT_INTENSITY_CONFIG = {
    "chill": {"count": 5, "cooldown_count": 0, "cooldown_seconds": 0},
    "stretch": {"count": 5, "cooldown_count": 0, "cooldown_seconds": 0},
    "regular": {"count": 5, "cooldown_count": 0, "cooldown_seconds": 0},
    "intense": {"count": 6, "cooldown_count": 2, "cooldown_seconds": 45},
    "hardcore": {"count": 6, "cooldown_count": 2, "cooldown_seconds": 45},
}

DEFAULT_PLAYLISTS = {
    "electronic": {
        "title": "Electronic Short Mix",
        "hint": "Electronic energy",
        "reference": "https://open.spotify.com/playlist/7H0rGB63hUimokOWAFPi9S",
    },
    "lofi": {
        "title": "Lofi 5-min",
        "hint": "Chill beats",
        "reference": "https://open.spotify.com/playlist/71hJFZoqd7Ow3xZq3S5PyM",
    },
    "hiphop": {
        "title": "Hip-Hop Pump",
        "hint": "Hip-Hop energy",
        "reference": "https://open.spotify.com/playlist/5A5cLkWcIc5BifNOa4UZTl",
    },
    "rock": {
        "title": "Rock Short",
        "hint": "Rock pump",
        "reference": "https://open.spotify.com/playlist/4BxyA2GrkSiKWwKEqVFh6r",
    },
    "pop": {
        "title": "Pop Hits",
        "hint": "Pop vibes",
        "reference": "https://open.spotify.com/playlist/6v84skfMiLBEgUOEHB6LNS",
    },
}
