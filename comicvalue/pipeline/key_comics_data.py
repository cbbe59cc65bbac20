"""
Comic Valuation — Curated Key Comics

Key facts for well-known key issues. Checked before any model call; an
entry here is authoritative.

Each row is (title, issue, [facts]). Titles are matched after
normalisation (see key_comics.normalize_title).
"""

KEY_COMICS: list[tuple[str, str, list[str]]] = [
    # MARVEL - SPIDER-MAN
    (
        "Amazing Fantasy",
        "15",
        [
            "First appearance of Spider-Man",
            "First appearance of Uncle Ben",
            "First appearance of Aunt May",
        ],
    ),
    (
        "Amazing Spider-Man",
        "1",
        [
            "First issue of Amazing Spider-Man series",
            "First appearance of J. Jonah Jameson",
            "First appearance of Chameleon",
        ],
    ),
    ("Amazing Spider-Man", "2", ["First appearance of the Vulture"]),
    ("Amazing Spider-Man", "3", ["First appearance of Doctor Octopus"]),
    (
        "Amazing Spider-Man",
        "4",
        [
            "First appearance of Sandman",
            "First appearance of Betty Brant",
        ],
    ),
    ("Amazing Spider-Man", "6", ["First appearance of the Lizard"]),
    ("Amazing Spider-Man", "9", ["First appearance of Electro"]),
    ("Amazing Spider-Man", "13", ["First appearance of Mysterio"]),
    ("Amazing Spider-Man", "14", ["First appearance of the Green Goblin"]),
    ("Amazing Spider-Man", "20", ["First appearance of Scorpion"]),
    ("Amazing Spider-Man", "25", ["First cameo appearance of Mary Jane Watson"]),
    ("Amazing Spider-Man", "28", ["First Molten Man"]),
    (
        "Amazing Spider-Man",
        "31",
        [
            "First appearance of Gwen Stacy",
            "First appearance of Harry Osborn",
        ],
    ),
    ("Amazing Spider-Man", "42", ["First full appearance of Mary Jane Watson"]),
    (
        "Amazing Spider-Man",
        "50",
        [
            "First appearance of Kingpin",
            "Classic 'Spider-Man No More' cover",
        ],
    ),
    ("Amazing Spider-Man", "101", ["First appearance of Morbius the Living Vampire"]),
    ("Amazing Spider-Man", "121", ["Death of Gwen Stacy"]),
    ("Amazing Spider-Man", "122", ["Death of the Green Goblin (Norman Osborn)"]),
    (
        "Amazing Spider-Man",
        "129",
        [
            "First appearance of the Punisher",
            "First appearance of the Jackal",
        ],
    ),
    ("Amazing Spider-Man", "194", ["First appearance of Black Cat"]),
    ("Amazing Spider-Man", "238", ["First appearance of Hobgoblin"]),
    (
        "Amazing Spider-Man",
        "252",
        [
            "First appearance of Spider-Man's black costume in main continuity",
        ],
    ),
    (
        "Amazing Spider-Man",
        "298",
        [
            "First Todd McFarlane art on Amazing Spider-Man",
            "First cameo of Eddie Brock",
        ],
    ),
    ("Amazing Spider-Man", "299", ["First cameo appearance of Venom"]),
    ("Amazing Spider-Man", "300", ["First full appearance of Venom", "Origin of Venom"]),
    ("Amazing Spider-Man", "316", ["First Venom cover"]),
    ("Amazing Spider-Man", "344", ["First appearance of Cletus Kasady"]),
    ("Amazing Spider-Man", "361", ["First full appearance of Carnage"]),
    ("Amazing Spider-Man", "569", ["First appearance of Anti-Venom"]),
    ("Amazing Spider-Man", "654", ["First appearance of Agent Venom (Flash Thompson)"]),
    ("Amazing Spider-Man", "667", ["First Spider-Island"]),
    ("Amazing Spider-Man", "700", ["Death of Peter Parker", "Doctor Octopus becomes Spider-Man"]),

    # MARVEL - SECRET WARS
    (
        "Secret Wars",
        "1",
        [
            "First issue of Marvel Super Heroes Secret Wars",
            "Major Marvel crossover event begins",
        ],
    ),
    (
        "Secret Wars",
        "8",
        [
            "First appearance of Spider-Man's black symbiote costume",
            "Origin of the symbiote that becomes Venom",
        ],
    ),
    (
        "Marvel Super Heroes Secret Wars",
        "1",
        [
            "First issue of Marvel Super Heroes Secret Wars",
            "Major Marvel crossover event begins",
        ],
    ),
    (
        "Marvel Super Heroes Secret Wars",
        "8",
        [
            "First appearance of Spider-Man's black symbiote costume",
            "Origin of the symbiote that becomes Venom",
        ],
    ),
    (
        "Marvel Super-Heroes Secret Wars",
        "1",
        [
            "First issue of Marvel Super Heroes Secret Wars",
            "Major Marvel crossover event begins",
        ],
    ),
    (
        "Marvel Super-Heroes Secret Wars",
        "8",
        [
            "First appearance of Spider-Man's black symbiote costume",
            "Origin of the symbiote that becomes Venom",
        ],
    ),

    # MARVEL - X-MEN
    (
        "X-Men",
        "1",
        [
            "First appearance of the X-Men",
            "First appearance of Professor X",
            "First appearance of Magneto",
            "First appearance of Cyclops, Marvel Girl, Beast, Angel, Iceman",
        ],
    ),
    (
        "X-Men",
        "4",
        [
            "First appearance of Scarlet Witch",
            "First appearance of Quicksilver",
            "First appearance of Brotherhood of Evil Mutants",
        ],
    ),
    ("X-Men", "12", ["First appearance of Juggernaut"]),
    ("X-Men", "14", ["First appearance of the Sentinels"]),
    ("X-Men", "28", ["First Banshee"]),
    ("X-Men", "94", ["New X-Men team begins (Wolverine, Storm, Colossus, Nightcrawler join)"]),
    ("X-Men", "101", ["First appearance of Phoenix"]),
    ("X-Men", "120", ["First cameo of Alpha Flight"]),
    ("X-Men", "121", ["First full appearance of Alpha Flight"]),
    ("X-Men", "129", ["First appearance of Kitty Pryde", "First appearance of Emma Frost"]),
    ("X-Men", "130", ["First appearance of Dazzler"]),
    ("X-Men", "131", ["First White Queen cover"]),
    ("X-Men", "132", ["First Hellfire Club"]),
    ("X-Men", "133", ["Classic Wolverine cover"]),
    ("X-Men", "135", ["Dark Phoenix Saga"]),
    ("X-Men", "137", ["Death of Phoenix (Jean Grey)"]),
    ("X-Men", "141", ["Days of Future Past begins", "First Rachel Summers"]),
    ("X-Men", "142", ["Days of Future Past concludes"]),
    ("X-Men", "168", ["First Madelyne Pryor"]),
    ("X-Men", "221", ["First appearance of Mister Sinister"]),
    ("X-Men", "244", ["First appearance of Jubilee"]),
    ("X-Men", "266", ["First full appearance of Gambit"]),
    (
        "Uncanny X-Men",
        "94",
        [
            "New X-Men team begins (Wolverine, Storm, Colossus, Nightcrawler join)",
        ],
    ),
    ("Uncanny X-Men", "101", ["First appearance of Phoenix"]),
    (
        "Uncanny X-Men",
        "129",
        [
            "First appearance of Kitty Pryde",
            "First appearance of Emma Frost",
        ],
    ),
    ("Uncanny X-Men", "141", ["Days of Future Past begins"]),
    ("Uncanny X-Men", "266", ["First full appearance of Gambit"]),
    ("Uncanny X-Men", "282", ["First appearance of Bishop"]),
    (
        "Giant-Size X-Men",
        "1",
        [
            "First appearance of the new X-Men team",
            "First appearance of Storm",
            "First appearance of Colossus",
            "First appearance of Nightcrawler",
            "Second appearance of Wolverine",
        ],
    ),

    # MARVEL - WOLVERINE / HULK
    ("Incredible Hulk", "1", ["First appearance of the Hulk", "First appearance of Bruce Banner"]),
    ("Incredible Hulk", "180", ["First cameo appearance of Wolverine"]),
    ("Incredible Hulk", "181", ["First full appearance of Wolverine"]),
    ("Incredible Hulk", "182", ["Third appearance of Wolverine"]),
    ("Incredible Hulk", "271", ["First comic appearance of Rocket Raccoon"]),
    ("Incredible Hulk", "340", ["Classic Todd McFarlane Wolverine vs Hulk cover"]),
    ("Incredible Hulk", "377", ["Professor Hulk"]),
    ("Incredible Hulk", "449", ["First Thunderbolts"]),
    ("Wolverine", "1", ["First Wolverine limited series", "Frank Miller art"]),
    ("Wolverine", "10", ["Classic Sabretooth battle"]),
    ("Wolverine", "66", ["Old Man Logan storyline begins"]),
    ("Immortal Hulk", "1", ["First Immortal Hulk"]),
    ("Savage She-Hulk", "1", ["First She-Hulk"]),

    # MARVEL - NEW MUTANTS / DEADPOOL / X-FORCE
    ("New Mutants", "1", ["First appearance of the New Mutants team"]),
    ("New Mutants", "87", ["First appearance of Cable"]),
    ("New Mutants", "98", ["First appearance of Deadpool", "First appearance of Domino"]),
    ("New Mutants", "100", ["First appearance of X-Force"]),
    ("X-Force", "1", ["X-Force begins"]),
    ("X-Force", "2", ["Second Deadpool"]),
    ("X-Factor", "6", ["First Apocalypse"]),
    ("X-Factor", "24", ["First Archangel"]),
    ("Alpha Flight", "1", ["First Alpha Flight solo"]),
    ("Alpha Flight", "33", ["First Lady Deathstrike"]),

    # MARVEL - AVENGERS
    (
        "Avengers",
        "1",
        [
            "First appearance of the Avengers team",
            "First Avengers lineup: Thor, Iron Man, Hulk, Ant-Man, Wasp",
        ],
    ),
    (
        "Avengers",
        "4",
        [
            "First Silver Age appearance of Captain America",
            "Captain America joins the Avengers",
        ],
    ),
    ("Avengers", "16", ["New Avengers lineup"]),
    ("Avengers", "57", ["First appearance of Vision"]),
    ("Avengers", "87", ["Origin of Black Panther"]),
    ("Avengers", "181", ["First appearance of Scott Lang as Ant-Man"]),
    ("Avengers", "195", ["First cameo of Taskmaster"]),
    ("Avengers", "196", ["First full appearance of Taskmaster"]),
    ("Avengers", "221", ["Hawkeye becomes leader"]),
    ("Avengers", "223", ["Classic Hawkeye/Ant-Man"]),
    ("Avengers", "500", ["Avengers Disassembled"]),
    ("West Coast Avengers", "45", ["First White Vision"]),
    ("New Avengers", "1", ["New Avengers begins"]),
    ("Young Avengers", "1", ["First Young Avengers"]),
    ("Dark Avengers", "1", ["First Dark Avengers"]),

    # MARVEL - IRON MAN / CAPTAIN AMERICA / THOR
    ("Tales of Suspense", "39", ["First appearance of Iron Man"]),
    ("Tales of Suspense", "52", ["First appearance of Black Widow"]),
    ("Tales of Suspense", "57", ["First appearance of Hawkeye"]),
    ("Tales to Astonish", "27", ["First Ant-Man"]),
    ("Iron Man", "1", ["First Iron Man solo series"]),
    ("Iron Man", "55", ["First appearance of Thanos", "First appearance of Drax the Destroyer"]),
    ("Iron Man", "118", ["First James Rhodes"]),
    ("Iron Man", "128", ["Demon in a Bottle storyline"]),
    ("Iron Man", "282", ["First War Machine armor"]),
    (
        "Captain America",
        "1",
        [
            "First appearance of Captain America (Golden Age)",
            "First appearance of Bucky Barnes",
            "First appearance of Red Skull",
        ],
    ),
    ("Captain America", "100", ["First Captain America solo (Silver Age)"]),
    ("Captain America", "109", ["Origin of Captain America retold"]),
    ("Captain America", "117", ["First appearance of Falcon"]),
    ("Captain America", "176", ["Captain America quits"]),
    ("Captain America", "241", ["Classic Punisher"]),
    ("Captain America", "323", ["First Super Patriot"]),
    ("Captain America", "332", ["Steve Rogers quits"]),
    ("Captain America", "360", ["First Crossbones"]),
    ("Captain America", "383", ["50th anniversary"]),
    ("Captain America", "25", ["Death of Captain America"]),
    ("Journey Into Mystery", "83", ["First appearance of Thor"]),
    ("Thor", "165", ["First full Him/Adam Warlock"]),
    ("Thor", "337", ["First appearance of Beta Ray Bill"]),
    ("Thor", "411", ["First New Warriors"]),
    ("Thor", "1", ["First appearance of Jane Foster as Thor"]),
    ("Mighty Thor", "1", ["Jane Foster Thor continues"]),

    # MARVEL - FANTASTIC FOUR
    (
        "Fantastic Four",
        "1",
        [
            "First appearance of the Fantastic Four",
            "First appearance of Mole Man",
        ],
    ),
    ("Fantastic Four", "5", ["First appearance of Doctor Doom"]),
    ("Fantastic Four", "12", ["Hulk vs Thing"]),
    ("Fantastic Four", "45", ["First appearance of the Inhumans"]),
    ("Fantastic Four", "46", ["First full appearance of Black Bolt"]),
    (
        "Fantastic Four",
        "48",
        [
            "First appearance of Silver Surfer",
            "First appearance of Galactus",
        ],
    ),
    ("Fantastic Four", "49", ["First full Galactus"]),
    ("Fantastic Four", "52", ["First appearance of Black Panther"]),
    ("Fantastic Four", "67", ["First Him (Adam Warlock)"]),

    # MARVEL - GUARDIANS / COSMIC
    ("Marvel Super-Heroes", "18", ["First appearance of the original Guardians of the Galaxy"]),
    ("Marvel Super-Heroes", "13", ["First Carol Danvers"]),
    ("Marvel Preview", "4", ["First appearance of Star-Lord"]),
    ("Marvel Preview", "7", ["First Rocket Raccoon full"]),
    ("Guardians of the Galaxy", "1", ["Modern GOTG (2008)"]),
    ("Annihilation", "1", ["Annihilation event"]),
    (
        "Infinity Gauntlet",
        "1",
        [
            "Infinity Gauntlet storyline begins",
            "Thanos wields the Infinity Gauntlet",
        ],
    ),
    ("Infinity Gauntlet", "2", ["Infinity Gauntlet continues"]),
    ("Silver Surfer", "1", ["First Silver Surfer solo"]),
    ("Silver Surfer", "3", ["First Mephisto"]),
    ("Silver Surfer", "4", ["Classic Thor vs Surfer"]),
    ("Silver Surfer", "44", ["First appearance of the Infinity Gauntlet"]),
    ("Warlock", "1", ["Adam Warlock solo"]),
    ("Thanos Quest", "1", ["Thanos Quest begins"]),
    ("Eternals", "1", ["First Eternals"]),
    ("Ms. Marvel", "1", ["First Ms. Marvel"]),
    ("Captain Marvel", "1", ["First Mar-Vell solo"]),

    # MARVEL - DAREDEVIL / STREET LEVEL
    ("Daredevil", "1", ["First appearance of Daredevil", "Origin of Daredevil"]),
    ("Daredevil", "7", ["First red costume"]),
    ("Daredevil", "131", ["First appearance of Bullseye"]),
    ("Daredevil", "158", ["Frank Miller begins"]),
    ("Daredevil", "168", ["First appearance of Elektra", "Frank Miller's Daredevil run begins"]),
    ("Daredevil", "181", ["Death of Elektra"]),
    ("Daredevil", "227", ["Born Again begins"]),
    ("Hero for Hire", "1", ["First appearance of Luke Cage"]),
    ("Marvel Premiere", "15", ["First appearance of Iron Fist"]),
    ("Werewolf by Night", "32", ["First appearance of Moon Knight"]),
    ("Moon Knight", "1", ["First Moon Knight solo"]),

    # MARVEL - GHOST RIDER / BLADE / HORROR
    ("Marvel Spotlight", "5", ["First appearance of Ghost Rider (Johnny Blaze)"]),
    ("Ghost Rider", "1", ["First Ghost Rider solo"]),
    ("Tomb of Dracula", "10", ["First appearance of Blade"]),
    ("Strange Tales", "110", ["First Doctor Strange"]),
    ("Strange Tales", "135", ["First Nick Fury, SHIELD"]),
    ("Strange Tales", "169", ["First Brother Voodoo"]),
    ("Strange Tales", "178", ["First Magus"]),
    ("Marvel Two-in-One Annual", "2", ["First Thanos death"]),

    # MARVEL - MILES MORALES / SPIDER-VERSE
    ("Ultimate Fallout", "4", ["First appearance of Miles Morales as Spider-Man"]),
    (
        "Edge of Spider-Verse",
        "2",
        [
            "First appearance of Spider-Gwen (Gwen Stacy as Spider-Woman)",
        ],
    ),

    # MARVEL - VENOM
    ("Venom: Lethal Protector", "1", ["First Venom solo series"]),
    ("Venom", "1", ["First issue of 2018 Venom series"]),
    ("Venom", "3", ["First appearance of Knull"]),

    # MARVEL - SPIDER-MAN EXTENDED UNIVERSE
    ("Spider-Verse", "1", ["Spider-Verse event"]),
    ("Spider-Man", "1", ["McFarlane Spider-Man #1"]),
    ("Spider-Gwen", "1", ["Spider-Gwen solo"]),
    ("Silk", "1", ["First Silk solo"]),
    ("Web of Spider-Man", "1", ["First Web of Spider-Man"]),
    ("Spectacular Spider-Man", "1", ["First Spectacular Spider-Man"]),
    ("Sensational Spider-Man", "1", ["First Sensational Spider-Man"]),
    ("Superior Spider-Man", "1", ["First Superior Spider-Man"]),
    ("Spider-Man 2099", "1", ["First Spider-Man 2099"]),
    ("What If", "105", ["First Spider-Girl"]),
    ("What If", "1", ["First What If"]),

    # MARVEL - EVENTS
    ("Contest of Champions", "1", ["First limited series crossover"]),
    ("House of M", "1", ["House of M begins"]),
    ("House of M", "7", ["No More Mutants"]),
    ("Civil War", "1", ["Civil War begins"]),
    ("Civil War", "7", ["Death of Captain America tie-in"]),
    ("Siege", "1", ["Siege event"]),
    ("Fear Itself", "1", ["Fear Itself event"]),
    ("Avengers vs X-Men", "1", ["AvX event"]),
    ("Age of Ultron", "1", ["Age of Ultron event"]),
    ("Original Sin", "1", ["Original Sin event"]),
    ("Secret Empire", "1", ["Secret Empire event"]),
    ("Secret Invasion", "1", ["Secret Invasion event"]),
    ("War of the Realms", "1", ["War of the Realms event"]),
    ("King in Black", "1", ["King in Black event"]),
    ("Absolute Carnage", "1", ["Absolute Carnage event"]),
    ("Extreme Carnage", "1", ["Extreme Carnage event"]),

    # MARVEL - BLACK PANTHER
    ("Black Panther", "1", ["First Black Panther solo"]),
    ("Black Panther", "7", ["First Okoye"]),
    ("Jungle Action", "6", ["First Killmonger"]),
    ("Shuri", "1", ["First Shuri solo"]),
    ("Killmonger", "1", ["First Killmonger solo"]),

    # MARVEL - MODERN SOLOS
    ("Vision", "1", ["First Vision solo (King)"]),
    ("Scarlet Witch", "1", ["First Scarlet Witch solo"]),
    ("Hawkeye", "1", ["First Hawkeye solo (Fraction)"]),
    ("Hawkeye", "2", ["Pizza Dog"]),
    ("She-Hulk", "1", ["She-Hulk solo (2022)"]),
    ("Loki", "1", ["First Loki solo"]),
    ("Runaways", "1", ["First Runaways"]),
    ("Champions", "1", ["First Champions (2016)"]),
    ("Squirrel Girl", "1", ["First Unbeatable Squirrel Girl"]),
    ("America", "1", ["First America Chavez solo"]),
    ("Power Pack", "1", ["First Power Pack"]),

    # DC - BATMAN
    ("Detective Comics", "27", ["First appearance of Batman"]),
    ("Detective Comics", "31", ["Classic Batman cover"]),
    ("Detective Comics", "38", ["First appearance of Robin (Dick Grayson)"]),
    ("Detective Comics", "140", ["First appearance of the Riddler"]),
    ("Detective Comics", "168", ["Origin of Red Hood"]),
    ("Detective Comics", "225", ["First Martian Manhunter"]),
    ("Detective Comics", "233", ["First Batwoman"]),
    ("Detective Comics", "359", ["First appearance of Batgirl (Barbara Gordon)"]),
    ("Detective Comics", "400", ["First Man-Bat"]),
    ("Detective Comics", "411", ["First Talia al Ghul"]),
    ("Detective Comics", "880", ["Classic Jock Joker cover"]),
    ("Detective Comics", "934", ["Rebirth Detective Comics"]),
    ("Batman", "1", ["First appearance of Joker", "First appearance of Catwoman"]),
    ("Batman", "181", ["First appearance of Poison Ivy"]),
    ("Batman", "232", ["First appearance of Ra's al Ghul"]),
    ("Batman", "251", ["Classic Joker cover"]),
    ("Batman", "357", ["First appearance of Jason Todd"]),
    ("Batman", "386", ["First Black Mask"]),
    ("Batman", "404", ["Batman: Year One begins"]),
    ("Batman", "423", ["Classic McFarlane cover"]),
    ("Batman", "426", ["A Death in the Family storyline begins"]),
    ("Batman", "427", ["Death in the Family"]),
    ("Batman", "428", ["Death of Jason Todd"]),
    ("Batman", "497", ["Bane breaks Batman's back"]),
    ("Batman", "567", ["First Cassandra Cain Batgirl"]),
    ("Batman", "608", ["Hush storyline begins", "Jim Lee art"]),
    ("Batman", "655", ["First appearance of Damian Wayne"]),
    ("Batman Adventures", "12", ["First comic book appearance of Harley Quinn"]),
    (
        "Batman: The Killing Joke",
        "1",
        [
            "The Killing Joke - Alan Moore/Brian Bolland",
            "Barbara Gordon paralyzed",
        ],
    ),
    ("Batman: Dark Knight Returns", "1", ["The Dark Knight Returns begins - Frank Miller"]),
    ("Harley Quinn", "1", ["First Harley solo"]),

    # DC - BAT-FAMILY
    ("Nightwing", "1", ["First Nightwing solo"]),
    ("Red Hood and the Outlaws", "1", ["First Red Hood solo"]),
    ("Batwoman", "1", ["First Batwoman solo"]),
    ("Batgirl", "1", ["New 52 Batgirl"]),
    ("Batgirl of Burnside", "35", ["Burnside begins"]),
    ("Robin", "1", ["First Robin solo (Tim Drake)"]),
    ("Batman and Robin", "1", ["Morrison Batman and Robin"]),
    ("Grayson", "1", ["First Grayson spy series"]),
    ("Gotham Central", "1", ["First Gotham Central"]),
    ("Birds of Prey", "1", ["First Birds of Prey"]),
    ("Catwoman", "1", ["First Catwoman solo"]),
    ("Poison Ivy", "1", ["First Poison Ivy solo"]),

    # DC - BATMAN EVENTS / MODERN
    ("Batman Who Laughs", "1", ["First Batman Who Laughs solo"]),
    ("Dark Nights: Metal", "1", ["Metal event begins"]),
    ("Dark Nights: Death Metal", "1", ["Death Metal event"]),
    ("Batman: White Knight", "1", ["White Knight begins"]),
    ("Three Jokers", "1", ["Three Jokers begins"]),
    ("DCeased", "1", ["DCeased begins"]),
    ("Injustice", "1", ["First Injustice"]),
    ("Batman/Fortnite", "1", ["Batman Fortnite crossover"]),

    # DC - SUPERMAN
    (
        "Action Comics",
        "1",
        [
            "First appearance of Superman",
            "Most valuable comic book in existence",
        ],
    ),
    ("Action Comics", "242", ["First Brainiac"]),
    ("Action Comics", "252", ["First appearance of Supergirl"]),
    ("Action Comics", "521", ["First Vixen"]),
    ("Superman", "1", ["First Superman solo (Golden Age)"]),
    ("Superman", "75", ["Death of Superman"]),
    ("Superman", "233", ["Classic Kryptonite No More"]),
    ("Superman's Pal Jimmy Olsen", "134", ["First appearance of Darkseid (cameo)"]),
    ("Forever People", "1", ["First full appearance of Darkseid"]),
    ("Adventure Comics", "247", ["First Legion of Super-Heroes"]),
    ("Superboy", "68", ["First Bizarro"]),
    ("Supergirl", "1", ["First Supergirl solo (modern)"]),
    ("Superboy", "1", ["First Superboy solo (Kon-El)"]),

    # DC - NEW GODS / FOURTH WORLD
    ("New Gods", "1", ["First Orion, New Gods"]),
    ("New Gods", "7", ["First Steppenwolf"]),
    ("Mister Miracle", "1", ["First Mister Miracle"]),

    # DC - WONDER WOMAN
    ("All Star Comics", "8", ["First appearance of Wonder Woman"]),
    ("Sensation Comics", "1", ["Wonder Woman origin"]),
    ("Wonder Woman", "1", ["First Wonder Woman solo comic"]),
    ("Wonder Woman", "98", ["First Silver Age Wonder Woman"]),
    ("Wonder Woman", "178", ["New Wonder Woman begins"]),
    ("Wonder Woman", "329", ["Last pre-Crisis"]),

    # DC - FLASH / GREEN LANTERN
    (
        "Showcase",
        "4",
        [
            "First appearance of Barry Allen Flash",
            "Beginning of the Silver Age of Comics",
        ],
    ),
    ("Showcase", "22", ["First appearance of Hal Jordan Green Lantern"]),
    ("Showcase", "34", ["First Silver Age Atom"]),
    ("Flash", "1", ["First Flash solo (Silver Age)"]),
    ("Flash", "105", ["First Silver Age Flash"]),
    ("Flash", "110", ["First Kid Flash"]),
    (
        "Flash",
        "123",
        [
            "Flash of Two Worlds - first Silver Age/Golden Age crossover",
            "Introduction of the multiverse concept",
        ],
    ),
    ("Flash", "139", ["First appearance of Reverse Flash (Professor Zoom)"]),
    ("Green Lantern", "1", ["First Green Lantern solo (Silver Age)"]),
    ("Green Lantern", "7", ["First appearance of Sinestro"]),
    ("Green Lantern", "59", ["First Guy Gardner"]),
    ("Green Lantern", "76", ["Green Lantern/Green Arrow begins - Dennis O'Neil/Neal Adams"]),
    ("Green Lantern", "87", ["First appearance of John Stewart"]),
    ("Green Lantern", "122", ["Guy Gardner backup begins"]),
    ("Green Lantern", "188", ["First Star Sapphire modern"]),
    ("Green Lantern", "195", ["Guy Gardner gets ring"]),
    ("Green Lantern", "50", ["Emerald Twilight (1994)"]),
    ("Green Lantern Corps", "201", ["Kilowog spotlight"]),
    ("Green Lantern: Rebirth", "1", ["Hal Jordan returns"]),
    ("Green Arrow", "1", ["First Green Arrow solo"]),
    ("Aquaman", "35", ["First Black Manta"]),
    ("Black Canary", "1", ["First Black Canary solo"]),

    # DC - JUSTICE LEAGUE / TEEN TITANS
    ("Brave and the Bold", "28", ["First appearance of the Justice League of America"]),
    ("Justice League", "1", ["Justice League International"]),
    ("Justice League of America", "1", ["First JLA solo"]),
    ("Justice League of America", "21", ["First Silver Age JSA"]),
    ("Justice League of America", "29", ["First Starman"]),
    ("New Teen Titans", "1", ["First appearance of the New Teen Titans team"]),
    ("New Teen Titans", "2", ["First appearance of Deathstroke"]),
    (
        "DC Comics Presents",
        "26",
        [
            "First appearance of Cyborg",
            "First appearance of Raven",
            "First appearance of Starfire",
        ],
    ),
    ("Tales of the Teen Titans", "44", ["First appearance of Nightwing costume"]),
    ("Teen Titans", "12", ["First Wally West as Kid Flash"]),
    ("Titans", "1", ["Titans Rebirth"]),
    ("Deathstroke", "1", ["First Deathstroke solo"]),
    ("Blue Beetle", "1", ["First Jaime Reyes solo"]),
    ("Doom Patrol", "99", ["First Beast Boy"]),
    ("Suicide Squad", "1", ["First modern Suicide Squad"]),

    # DC - CRISIS / EVENTS
    ("Crisis on Infinite Earths", "1", ["Crisis on Infinite Earths begins"]),
    ("Crisis on Infinite Earths", "7", ["Death of Supergirl"]),
    ("Crisis on Infinite Earths", "8", ["Death of Barry Allen Flash"]),
    ("Infinite Crisis", "1", ["Infinite Crisis begins"]),
    ("Final Crisis", "1", ["Final Crisis begins"]),
    ("Identity Crisis", "1", ["Identity Crisis begins"]),
    ("52", "1", ["52 weekly series"]),
    ("Countdown", "51", ["Countdown begins"]),
    ("Doomsday Clock", "1", ["Doomsday Clock begins"]),
    ("Flashpoint", "1", ["Flashpoint event begins", "Leads to New 52 reboot"]),
    ("Dark Nights: Metal", "2", ["First appearance of the Batman Who Laughs"]),
    ("DC Special Series", "27", ["First Batman/Superman vs Hulk"]),
    ("Marvel vs DC", "1", ["Marvel vs DC"]),

    # DC - VERTIGO / OTHER
    ("Swamp Thing", "37", ["First appearance of John Constantine"]),
    ("Hellblazer", "1", ["First Constantine solo"]),
    ("Sandman", "1", ["First appearance of Dream/Morpheus - Neil Gaiman"]),
    ("Sandman", "8", ["First Death"]),
    ("Watchmen", "1", ["Watchmen begins - Alan Moore/Dave Gibbons"]),
    ("V for Vendetta", "1", ["First V for Vendetta"]),
    ("Preacher", "1", ["First Preacher"]),
    ("Y: The Last Man", "1", ["First Y: The Last Man"]),
    ("Fables", "1", ["First Fables"]),
    ("Transmetropolitan", "1", ["First Transmetropolitan"]),
    ("100 Bullets", "1", ["First 100 Bullets"]),
    ("Sweet Tooth", "1", ["First Sweet Tooth"]),
    ("The Nice House on the Lake", "1", ["First Nice House on the Lake"]),
    ("Human Target", "1", ["Human Target (King)"]),
    ("Strange Adventures", "1", ["Strange Adventures (King)"]),
    ("Omega Men", "1", ["Omega Men (King)"]),
    ("Sheriff of Babylon", "1", ["First Sheriff of Babylon"]),

    # IMAGE - SPAWN
    ("Spawn", "1", ["First appearance of Spawn", "Todd McFarlane creator-owned"]),
    ("Spawn", "9", ["First Angela"]),
    ("Spawn", "174", ["First She-Spawn"]),

    # IMAGE - WALKING DEAD / KIRKMAN
    ("Walking Dead", "1", ["First appearance of Rick Grimes", "Walking Dead series begins"]),
    ("Walking Dead", "19", ["First appearance of Michonne"]),
    ("Walking Dead", "27", ["First Governor"]),
    ("Walking Dead", "92", ["First Jesus"]),
    ("Walking Dead", "100", ["First appearance of Negan"]),
    ("Invincible", "1", ["First appearance of Invincible - Robert Kirkman"]),
    ("Outcast", "1", ["First Outcast"]),
    ("Oblivion Song", "1", ["First Oblivion Song"]),
    ("Fire Power", "1", ["First Fire Power"]),

    # IMAGE - SAGA / BKV
    ("Saga", "1", ["Saga series begins - Brian K. Vaughan"]),
    ("Paper Girls", "1", ["First Paper Girls"]),

    # IMAGE - MODERN HITS
    ("Something is Killing the Children", "1", ["First SIKTC"]),
    ("House of Slaughter", "1", ["First House of Slaughter"]),
    ("Department of Truth", "1", ["First Department of Truth"]),
    ("Nocterra", "1", ["First Nocterra"]),
    ("Geiger", "1", ["First Geiger"]),
    ("Ice Cream Man", "1", ["First Ice Cream Man"]),
    ("Gideon Falls", "1", ["First Gideon Falls"]),
    ("Bitter Root", "1", ["First Bitter Root"]),
    ("Undiscovered Country", "1", ["First Undiscovered Country"]),
    ("Crossover", "1", ["First Crossover"]),
    ("East of West", "1", ["First East of West"]),
    ("Deadly Class", "1", ["First Deadly Class"]),
    ("Descender", "1", ["First Descender"]),
    ("Low", "1", ["First Low"]),
    ("Black Science", "1", ["First Black Science"]),
    ("Chew", "1", ["First Chew"]),

    # INDEPENDENT - CLASSIC
    (
        "Teenage Mutant Ninja Turtles",
        "1",
        [
            "First appearance of the Teenage Mutant Ninja Turtles",
        ],
    ),
    ("Bone", "1", ["First Bone"]),
    ("Usagi Yojimbo", "1", ["First Usagi Yojimbo"]),
    ("Hellboy", "1", ["First Hellboy"]),
    ("Sin City", "1", ["First Sin City"]),
    ("300", "1", ["First 300"]),
    ("Maus", "1", ["First Maus"]),
    ("Locke & Key", "1", ["First Locke & Key"]),
]
