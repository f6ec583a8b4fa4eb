UNIVERSITIES = [
    {
        "id": 1,
        "name": "University of Ibadan",
        "location": "Ibadan",
        "state": "Oyo",
        "type": "Federal",
        "established": 1948,
        "rating": 4.8,
        "programs": ["Medicine", "Engineering", "Law", "Arts", "Science", "Business"],
        "website": "www.ui.edu.ng",
    },
    {
        "id": 2,
        "name": "University of Lagos",
        "location": "Lagos",
        "state": "Lagos",
        "type": "Federal",
        "established": 1962,
        "rating": 4.7,
        "programs": ["Engineering", "Medicine", "Law", "Business", "Arts", "Science"],
        "website": "www.unilag.edu.ng",
    },
    {
        "id": 3,
        "name": "Ahmadu Bello University",
        "location": "Zaria",
        "state": "Kaduna",
        "type": "Federal",
        "established": 1962,
        "rating": 4.6,
        "programs": ["Agriculture", "Engineering", "Medicine", "Veterinary", "Arts", "Science"],
        "website": "www.abu.edu.ng",
    },
    {
        "id": 4,
        "name": "Covenant University",
        "location": "Ota",
        "state": "Ogun",
        "type": "Private",
        "established": 2002,
        "rating": 4.9,
        "programs": ["Engineering", "Business", "Sciences", "Computing", "Architecture"],
        "website": "www.covenantuniversity.edu.ng",
    },
    {
        "id": 5,
        "name": "University of Jos",
        "location": "Jos",
        "state": "Plateau",
        "type": "Federal",
        "established": 1975,
        "rating": 4.4,
        "programs": ["Medicine", "Arts", "Science", "Education", "Pharmacy"],
        "website": "www.unijos.edu.ng",
    },
    {
        "id": 6,
        "name": "Obafemi Awolowo University",
        "location": "Ile-Ife",
        "state": "Osun",
        "type": "Federal",
        "established": 1961,
        "rating": 4.7,
        "programs": ["Medicine", "Engineering", "Law", "Pharmacy", "Arts", "Science"],
        "website": "www.oauife.edu.ng",
    },
]
