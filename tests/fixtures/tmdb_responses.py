"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for search, details and
external ids endpoints. These fixtures are used with respx to mock httpx
calls in tests.
"""

# Search response for "Avatar" query
# GET /search/movie?query=Avatar&language=en-US
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "genre_ids": [28, 12, 14, 878],
            "id": 19995,
            "original_language": "en",
            "original_title": "Avatar",
            "overview": "In the 22nd century, a paraplegic Marine is dispatched to the moon Pandora...",
            "popularity": 456.92,
            "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
            "release_date": "2009-12-15",
            "title": "Avatar",
            "video": False,
            "vote_average": 7.6,
            "vote_count": 27000,
        },
        {
            "adult": False,
            "backdrop_path": "/7BIwGH0WAEN3tQsB1X5HnVjj2bR.jpg",
            "genre_ids": [28, 12, 878],
            "id": 76600,
            "original_language": "en",
            "original_title": "Avatar: The Way of Water",
            "overview": "Set more than a decade after the events of the first film...",
            "popularity": 234.56,
            "poster_path": "/t6HIqrRAclMCA60NsSmeqe9RmNV.jpg",
            "release_date": "2022-12-14",
            "title": "Avatar: The Way of Water",
            "video": False,
            "vote_average": 7.7,
            "vote_count": 12000,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# Empty search response
TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Movie details for Avatar (19995)
# GET /movie/19995?language=en-US
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
    "budget": 237000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Adventure"},
        {"id": 14, "name": "Fantasy"},
        {"id": 878, "name": "Science Fiction"},
    ],
    "id": 19995,
    "imdb_id": "tt0499549",
    "original_language": "en",
    "original_title": "Avatar",
    "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
    "release_date": "2009-12-15",
    "runtime": 162,
    "status": "Released",
    "title": "Avatar",
    "vote_average": 7.6,
    "vote_count": 27000,
}

# TV search response for "Breaking Bad"
# GET /search/tv?query=Breaking Bad&language=en-US
TMDB_TV_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
            "first_air_date": "2008-01-20",
            "genre_ids": [18, 80],
            "id": 1396,
            "name": "Breaking Bad",
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "Breaking Bad",
            "popularity": 389.12,
            "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
            "vote_average": 8.9,
            "vote_count": 13500,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

# TV details for Breaking Bad (1396)
# GET /tv/1396?language=en-US
TMDB_TV_DETAILS_RESPONSE = {
    "id": 1396,
    "name": "Breaking Bad",
    "original_name": "Breaking Bad",
    "first_air_date": "2008-01-20",
    "number_of_seasons": 5,
    "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
    "vote_average": 8.9,
    "vote_count": 13500,
}

# External ids for Breaking Bad
# GET /tv/1396/external_ids
TMDB_TV_EXTERNAL_IDS_RESPONSE = {
    "id": 1396,
    "imdb_id": "tt0903747",
    "tvdb_id": 81189,
    "wikidata_id": "Q1079",
}
