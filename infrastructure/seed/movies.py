"""Movies and cast entries written to the tables on first deploy."""

MOVIES = [
    {
        "id": 1234,
        "title": "The Shawshank Redemption",
        "original_title": "The Shawshank Redemption",
        "original_language": "en",
        "release_date": "1994-09-23",
        "overview": (
            "Framed in the 1940s for the double murder of his wife and her lover, "
            "upstanding banker Andy Dufresne begins a new life at the Shawshank prison."
        ),
        "genre_ids": [18, 80],
        "adult": False,
        "popularity": 98.5,
        "vote_average": 8.7,
        "vote_count": 26000,
    },
    {
        "id": 2345,
        "title": "The Godfather",
        "original_title": "The Godfather",
        "original_language": "en",
        "release_date": "1972-03-14",
        "overview": (
            "Spanning the years 1945 to 1955, a chronicle of the fictional Italian-American "
            "Corleone crime family."
        ),
        "genre_ids": [18, 80],
        "adult": False,
        "popularity": 86.1,
        "vote_average": 8.7,
        "vote_count": 19700,
    },
    {
        "id": 3456,
        "title": "Spirited Away",
        "original_title": "千と千尋の神隠し",
        "original_language": "ja",
        "release_date": "2001-07-20",
        "overview": (
            "A young girl, Chihiro, becomes trapped in a strange new world of spirits."
        ),
        "genre_ids": [16, 10751, 14],
        "adult": False,
        "popularity": 75.3,
        "vote_average": 8.5,
        "vote_count": 16100,
    },
    {
        "id": 4567,
        "title": "Parasite",
        "original_title": "기생충",
        "original_language": "ko",
        "release_date": "2019-05-30",
        "overview": (
            "All unemployed, Ki-taek's family takes peculiar interest in the wealthy and "
            "glamorous Parks for their livelihood."
        ),
        "genre_ids": [35, 53, 18],
        "adult": False,
        "popularity": 64.9,
        "vote_average": 8.5,
        "vote_count": 18200,
    },
    {
        "id": 5678,
        "title": "Seven Samurai",
        "original_title": "七人の侍",
        "original_language": "ja",
        "release_date": "1954-04-26",
        "overview": (
            "A samurai answers a village's request for protection after he falls on hard times."
        ),
        "genre_ids": [28, 18],
        "adult": False,
        "popularity": 31.2,
        "vote_average": 8.5,
        "vote_count": 3500,
    },
]

MOVIE_CASTS = [
    {
        "movieId": 1234,
        "actorName": "Morgan Freeman",
        "roleName": "Ellis Boyd 'Red' Redding",
        "roleDescription": "A contraband smuggler serving a life sentence.",
    },
    {
        "movieId": 1234,
        "actorName": "Tim Robbins",
        "roleName": "Andy Dufresne",
        "roleDescription": "A banker wrongly convicted of murder.",
    },
    {
        "movieId": 1234,
        "actorName": "Bob Gunton",
        "roleName": "Warden Norton",
        "roleDescription": "The corrupt warden of Shawshank.",
    },
    {
        "movieId": 2345,
        "actorName": "Marlon Brando",
        "roleName": "Don Vito Corleone",
        "roleDescription": "Head of the Corleone family.",
    },
    {
        "movieId": 2345,
        "actorName": "Al Pacino",
        "roleName": "Michael Corleone",
        "roleDescription": "The Don's youngest son.",
    },
    {
        "movieId": 3456,
        "actorName": "Rumi Hiiragi",
        "roleName": "Chihiro Ogino",
        "roleDescription": "A ten-year-old girl lost in the spirit world.",
    },
    {
        "movieId": 4567,
        "actorName": "Song Kang-ho",
        "roleName": "Kim Ki-taek",
        "roleDescription": "The father of the Kim family.",
    },
    {
        "movieId": 5678,
        "actorName": "Toshiro Mifune",
        "roleName": "Kikuchiyo",
        "roleDescription": "A brash would-be samurai.",
    },
]
