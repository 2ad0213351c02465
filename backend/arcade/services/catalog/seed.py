from arcade.models import Game

ARCADE_THUMB = "https://images.unsplash.com/photo-1550745165-9bc0b252726f?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=450"
PUZZLE_THUMB = "https://images.unsplash.com/photo-1578662996442-48f60103fc96?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=450"
ACTION_THUMB = "https://images.unsplash.com/photo-1542751371-adc38448a05e?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=450"


def _embed(slug):
    return f"https://www.gameflare.com/embed/{slug}/"


SEED_GAMES = [
    dict(title="Crossy Road", description="Help the chicken cross busy roads and rivers in this arcade hit.",
         thumbnail=ARCADE_THUMB, game_url=_embed("crossy-road"), category="action",
         plays=5200000, rating=49, is_trending=True),
    dict(title="Flappy Bird", description="Flap through the pipes and see how far you can fly.",
         thumbnail=ARCADE_THUMB, game_url=_embed("flappy-bird"), category="action",
         plays=4800000, rating=48, is_trending=True),
    dict(title="Knife Hit", description="Throw knives at the spinning target without hitting the others.",
         thumbnail=ACTION_THUMB, game_url=_embed("knife-hit"), category="action",
         plays=2100000, rating=46),
    dict(title="Geometry Dash", description="Jump and fly through rhythm-based obstacle courses.",
         thumbnail=ACTION_THUMB, game_url=_embed("geometry-dash"), category="action",
         plays=1700000, rating=47, is_new=True),
    dict(title="2048", description="Slide matching tiles together to reach 2048.",
         thumbnail=PUZZLE_THUMB, game_url=_embed("2048"), category="puzzle",
         plays=6500000, rating=50, is_trending=True),
    dict(title="Sudoku", description="Fill the grid so every row, column and box holds 1 to 9.",
         thumbnail=PUZZLE_THUMB, game_url=_embed("sudoku"), category="puzzle",
         plays=4200000, rating=48, is_trending=True),
    dict(title="Block Puzzle", description="Fit the falling blocks and clear full lines.",
         thumbnail=PUZZLE_THUMB, game_url=_embed("block-puzzle"), category="puzzle",
         plays=2900000, rating=45, is_new=True),
    dict(title="Highway Racer", description="Weave through traffic at top speed.",
         thumbnail=ARCADE_THUMB, game_url=_embed("highway-racer"), category="racing",
         plays=4600000, rating=48, is_trending=True),
    dict(title="Hill Climb", description="Drive over steep hills without flipping your car.",
         thumbnail=ARCADE_THUMB, game_url=_embed("hill-climb"), category="racing",
         plays=2700000, rating=45, is_new=True),
    dict(title="Tank Battle", description="Outmanoeuvre enemy tanks in head-to-head arena fights.",
         thumbnail=ACTION_THUMB, game_url=_embed("tank-battle"), category="multiplayer",
         plays=5800000, rating=48, is_trending=True),
    dict(title="Snake.io", description="Grow the longest snake in a crowded online arena.",
         thumbnail=ARCADE_THUMB, game_url=_embed("snake-io"), category="io",
         plays=9200000, rating=49, is_trending=True),
    dict(title="Tower Defense", description="Build towers along the path to stop every wave.",
         thumbnail=PUZZLE_THUMB, game_url=_embed("tower-defense"), category="strategy",
         plays=3100000, rating=47),
]


def seed_catalog(db):
    """Insert the starter catalog when the game table is empty. Returns rows added."""
    if Game.query.first() is not None:
        return 0
    for entry in SEED_GAMES:
        db.session.add(Game(**entry))
    db.session.commit()
    return len(SEED_GAMES)
