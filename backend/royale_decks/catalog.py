"""Static card catalog and the image URL convention used for seeding."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from royale_decks.models.card import CardType, Rarity

IMAGE_BASE_URL: Final[str] = "https://cdn.royaleapi.com/static/img/cards-150"


@dataclass(frozen=True, slots=True)
class CardSeed:
    name: str
    elixir: int
    rarity: Rarity
    type: CardType
    description: str

    @property
    def icon_url(self) -> str:
        return card_image_url(self.name)


def card_image_url(name: str) -> str:
    """Build the CDN image URL: lowercase, dots and apostrophes dropped, spaces to dashes."""
    slug = name.lower().replace(".", "")
    slug = re.sub(r"\s+", "-", slug).replace("'", "")
    return f"{IMAGE_BASE_URL}/{slug}.png"


_RAW_CARDS: Final[tuple[tuple[str, int, str, str, str], ...]] = (
    # COMMON
    ("Knight", 3, "COMMON", "TROOP",
     "A tough melee fighter. The Barbarian's handsome, cultured cousin."),
    ("Archers", 3, "COMMON", "TROOP",
     "A pair of lightly armored ranged attackers. They'll help you take down ground and air units."),
    ("Goblins", 2, "COMMON", "TROOP",
     "Three fast, unarmored melee attackers. Small, fast, green and mean!"),
    ("Bomber", 2, "COMMON", "TROOP",
     "This crazed bomber throws powerful bombs that deal area damage. Best when attacking from behind a tank."),
    ("Minions", 3, "COMMON", "TROOP",
     "Three fast, unarmored flying attackers. Roses are red, minions are blue!"),
    ("Minion Horde", 5, "COMMON", "TROOP",
     "Six fast, unarmored flying attackers. Three's a crowd, six is a horde!"),
    ("Bats", 2, "COMMON", "TROOP",
     "Five tiny flying creatures that deal damage fast. Great for taking out troops."),
    ("Ice Spirit", 1, "COMMON", "TROOP",
     "Spawns one lively little Ice Spirit to freeze a group of enemies."),
    ("Fire Spirit", 1, "COMMON", "TROOP",
     "Spawns one lively little Fire Spirit to deal area damage."),
    ("Royal Recruits", 7, "COMMON", "TROOP",
     "Deploys a line of recruits armed with spears and shields. Deals double damage when attacking buildings."),
    ("Skeletons", 1, "COMMON", "TROOP",
     "Three fast, very weak melee fighters. Surround your enemies with this pile of bones!"),
    ("Skeleton Barrel", 3, "COMMON", "TROOP",
     "It's a Skeleton party in a barrel! Drops 8 Skeletons onto your enemy's crown towers."),
    ("Rascals", 5, "COMMON", "TROOP",
     "The Rascal Boy has a sweet tooth and he throws his Sweet Stuff to slow down enemies."),
    ("Firecracker", 3, "COMMON", "TROOP",
     "She is a ranged splash damage troop. If she is left alone, her firecracker attacks get stronger!"),
    ("Elite Barbarians", 6, "COMMON", "TROOP",
     "Spawns a pair of leveled up Barbarians with mean mustaches and worse tempers!"),
    ("Zap", 2, "COMMON", "SPELL",
     "Zaps enemies, briefly stunning them and dealing damage inside a small radius."),
    ("Arrows", 3, "COMMON", "SPELL",
     "Arrows pepper a large area, damaging all enemies hit."),
    ("Giant Snowball", 2, "COMMON", "SPELL",
     "Rolls over enemies, damaging and slowing them. Hits flying troops too!"),
    ("Royal Delivery", 3, "COMMON", "SPELL",
     "Deals damage and slows down troops. Spawns a Royal Recruit after landing."),
    ("Cannon", 3, "COMMON", "BUILDING",
     "Defensive building. Shoots cannonballs with deadly effect, but cannot target flying troops."),
    ("Mortar", 4, "COMMON", "BUILDING",
     "Defensive building with a long range. Shoots exploding shells, but cannot target troops nearby."),
    ("Tesla", 4, "COMMON", "BUILDING",
     "Defensive building. Whenever it's not zapping the enemy, the power of Electrickery is best shown in a coil of wire!"),
    # RARE
    ("Giant", 5, "RARE", "TROOP",
     "Slow but durable, only attacks buildings. A real one-man wrecking crew!"),
    ("Valkyrie", 4, "RARE", "TROOP",
     "Tough melee fighter that targets ground troops. Swings her axe to deal area damage!"),
    ("Musketeer", 4, "RARE", "TROOP",
     "Don't be fooled by her delicately coiffed hair, the Musketeer is a mean shot with her trusty boomstick."),
    ("Mini P.E.K.K.A.", 4, "RARE", "TROOP",
     "The Arena is a certified butterfly-free zone. No distractions for P.E.K.K.A, only destruction."),
    ("Hog Rider", 4, "RARE", "TROOP",
     "Fast melee troop that targets buildings and can jump over the river. He followed the echoing call of Hog Rider all the way through the arena doors."),
    ("Mega Minion", 3, "RARE", "TROOP",
     "Flying, deals moderate damage, has high hitpoints. He lands with the force of 1000 mustaches."),
    ("Three Musketeers", 9, "RARE", "TROOP",
     "Trio of powerful, independent markswomen, fighting for justice and honor. Disliking Barbarians, eyeliner, and ice cream."),
    ("Ice Golem", 2, "RARE", "TROOP",
     "He's slow and doesn't deal much damage, but he has a lot of hitpoints and slows nearby enemies when destroyed."),
    ("Royal Giant", 6, "RARE", "TROOP",
     "Destroying enemy buildings with his massive cannon is his job; making a raggedy blond beard look good is his passion."),
    ("Spear Goblins", 2, "RARE", "TROOP",
     "Three unarmored ranged attackers. Who the heck taught these guys to throw spears!?"),
    ("Tombstone", 3, "RARE", "BUILDING",
     "Defensive building. Spawns Skeletons periodically. When destroyed, spawns 4 Skeletons."),
    ("Inferno Tower", 5, "RARE", "BUILDING",
     "Defensive building. Gradually increases damage. Excellent for taking down high-hitpoint enemies."),
    ("Furnace", 4, "RARE", "BUILDING",
     "Defensive building that spawns Fire Spirits. But the spirits are free!"),
    ("Elixir Collector", 6, "RARE", "BUILDING",
     "Produces Elixir over time. Protect it to maximize your gains!"),
    ("Rocket", 6, "RARE", "SPELL",
     "Deals high damage to a small area. Looks really awesome doing it. Reduced damage to Crown Towers."),
    ("Earthquake", 3, "RARE", "SPELL",
     "Quakes the ground, damages buildings. Can't affect troops, only buildings."),
    ("Heal Spirit", 1, "RARE", "SPELL",
     "A happy spirit that heals nearby friendly troops. Can be placed anywhere on the battlefield."),
    # EPIC
    ("P.E.K.K.A", 7, "EPIC", "TROOP",
     "A heavily armored, slow melee fighter. Deals high damage and has high hitpoints."),
    ("Golem", 8, "EPIC", "TROOP",
     "Slow but durable, only attacks buildings. When destroyed, splits into two Golemites!"),
    ("Baby Dragon", 4, "EPIC", "TROOP",
     "Burps out big fireballs that deal splash damage. Tanky and deals area damage!"),
    ("Witch", 5, "EPIC", "TROOP",
     "Summons Skeletons, shoots destructive fireballs from a distance. Please excuse her, she isn't a morning person."),
    ("Prince", 5, "EPIC", "TROOP",
     "Don't let the little pony fool you. Once the Prince gets a running start, you WILL be trampled."),
    ("Dark Prince", 4, "EPIC", "TROOP",
     "The Dark Prince deals area damage and lets his spiked club do the talking for him - because when he does talk, it sounds like he has a bucket on his head."),
    ("Executioner", 5, "EPIC", "TROOP",
     "He throws his axe like a boomerang, striking all enemies on the way out AND back."),
    ("Bowler", 5, "EPIC", "TROOP",
     "This big blue dude digs the simple things in life - Dark Elixir drinks and throwing rocks."),
    ("Balloon", 5, "EPIC", "TROOP",
     "As pretty as they are, you won't want a parade of THESE balloons showing up on the horizon."),
    ("Hunter", 4, "EPIC", "TROOP",
     "He deals BIG area damage up close, less from far away. Get in his face and he'll give you a face full of pellets!"),
    ("Giant Skeleton", 6, "EPIC", "TROOP",
     "The bigger the skeleton, the bigger the bomb. Carries a bomb that blows up when he dies!"),
    ("Goblin Giant", 6, "EPIC", "TROOP",
     "He's got a huge shield and two loyal Spear Goblins on his back. What could be better?"),
    ("Electro Dragon", 5, "EPIC", "TROOP",
     "Electroshocks up to three troops or buildings at once. Attacks slow, but hits hard!"),
    ("Cannon Cart", 5, "EPIC", "TROOP",
     "A Cannon on wheels? Bet they won't see that coming! Once you break its shield, it becomes a cannon building."),
    ("Wall Breakers", 2, "EPIC", "TROOP",
     "A pair of lightly armored bombers seek out buildings. Deals extra damage to buildings!"),
    ("Skeleton Army", 3, "EPIC", "TROOP",
     "Spawns an army of Skeletons. Useful for distracting and surrounding troops."),
    ("Goblin Drill", 4, "EPIC", "BUILDING",
     "Drills into the ground and spawns Goblins anywhere in the arena. A portable Goblin Hut!"),
    ("X-Bow", 6, "EPIC", "BUILDING",
     "A building that can hit enemy Crown Towers from your side of the Arena. Long range and packs a punch!"),
    ("Freeze", 4, "EPIC", "SPELL",
     "Freezes troops and buildings, making them unable to move or attack. Doesn't affect Crown Towers."),
    ("Lightning", 6, "EPIC", "SPELL",
     "Bolts of lightning damage and stun the three enemy troops or buildings with the highest hitpoints in the target area."),
    ("Poison", 4, "EPIC", "SPELL",
     "Covers the target area in a sticky toxin, damaging and slowing down troops and buildings."),
    ("Tornado", 3, "EPIC", "SPELL",
     "Drags enemy troops to its center while dealing damage over time. Can be used to activate the King's Tower!"),
    ("Mirror", 0, "EPIC", "SPELL",
     "Mirrors your last card played for +1 Elixir. Does NOT mirror Elixir Collector!"),
    ("Clone", 3, "EPIC", "SPELL",
     "Duplicates all friendly troops in the target area. Cloned troops are fragile, but pack the same punch!"),
    ("Rage", 2, "EPIC", "SPELL",
     "Increases the movement speed and attack speed of friendly troops. Chug! Chug! Chug!"),
    ("Barbarian Barrel", 2, "EPIC", "SPELL",
     "A rolling barrel that deals damage. Spawns a Barbarian when destroyed!"),
    ("Goblin Curse", 2, "EPIC", "SPELL",
     "Turns enemy troops into Goblins for a few seconds!"),
    ("Goblin Cage", 4, "EPIC", "BUILDING",
     "Spawns a Goblin Brawler once destroyed. Doesn't target air units."),
    ("Vines", 3, "EPIC", "SPELL",
     "Sprouts vines on both sides of the Arena that pull troops, slow them down and make them retarget."),
    # LEGENDARY
    ("Mega Knight", 7, "LEGENDARY", "TROOP",
     "He jumps on his enemies, stunning them and dealing massive damage. He has armor of steel and a mustache of night!"),
    ("Miner", 3, "LEGENDARY", "TROOP",
     "The Miner can be deployed anywhere in the arena. It's not magic, it's a shovel. A shovel that digs really, really fast."),
    ("Princess", 3, "LEGENDARY", "TROOP",
     "This stunning Princess shoots flaming arrows from long range. If you're feeling warm feelings towards her, it's probably because you're on fire."),
    ("Ice Wizard", 3, "LEGENDARY", "TROOP",
     "This chill caster throws ice shards that slow down enemies' movement and attack speed. Despite being freezing cold, he has a warm personality!"),
    ("Lava Hound", 7, "LEGENDARY", "TROOP",
     "The Lava Hound is a majestic flying beast that attacks buildings. The Lava Pups are less majestic angry babies that attack anything."),
    ("Inferno Dragon", 4, "LEGENDARY", "TROOP",
     "Shoots a focused beam of fire that increases in damage over time. Wears a helmet because flying can be dangerous."),
    ("Sparky", 6, "LEGENDARY", "TROOP",
     "Sparky slowly charges up, then unloads MASSIVE area damage. Overkill isn't in her vocabulary."),
    ("Magic Archer", 4, "LEGENDARY", "TROOP",
     "He's a Legendary sharpshooter with incredible range and a magic arrow that keeps on flying and damaging everything in its path."),
    ("Night Witch", 4, "LEGENDARY", "TROOP",
     "Summons Bats to do her bidding. Raised from the dead, she can summon Bats from the dead, too!"),
    ("Bandit", 3, "LEGENDARY", "TROOP",
     "The Bandit dashes to her target and delivers an extra big hit! While dashing, she can't be touched."),
    ("Royal Ghost", 3, "LEGENDARY", "TROOP",
     "He drifts silently and invisibly through the arena until he attacks or takes damage."),
    ("Ram Rider", 5, "LEGENDARY", "TROOP",
     "The Ram Rider charges through the Arena, dealing damage to Crown Towers. The rider snares enemies with her bola!"),
    ("Fisherman", 3, "LEGENDARY", "TROOP",
     "He'll hook you and bring you right next to him for a beating. The first time, it's funny. After that, it's just rude."),
    ("The Log", 2, "LEGENDARY", "SPELL",
     "A Legendary log that knocks back small troops and damages all ground troops in its path. A Legendary log! What's it worth to you?"),
    ("Graveyard", 5, "LEGENDARY", "SPELL",
     "Surprise! It's a party. A Skeleton party. Anywhere in the Arena. Yay!"),
    ("Spirit Empress", 6, "LEGENDARY", "SPELL",
     "She summons spirits to heal your troops and damage enemies. A true master of the spiritual arts!"),
)

CARD_CATALOG: Final[tuple[CardSeed, ...]] = tuple(
    CardSeed(name, elixir, Rarity(rarity), CardType(card_type), description)
    for name, elixir, rarity, card_type, description in _RAW_CARDS
)

__all__ = ["CARD_CATALOG", "IMAGE_BASE_URL", "CardSeed", "card_image_url"]
