# Built-in challenges seeded into every store on first run.
# end_date is computed from the seeding day.

PREDEFINED_CHALLENGES = [
    {
        "id": "predefined_30day_fitness",
        "name": "30-Day Fitness Challenge",
        "description": "Complete a workout every day for 30 days. Build strength, endurance, and consistency!",
        "habit_name": "Daily Workout",
        "length_days": 30,
        "emoji": "💪",
        "category": "Fitness",
    },
    {
        "id": "predefined_21day_reading",
        "name": "21-Day Reading Challenge",
        "description": "Read for at least 30 minutes every day. Expand your mind and build a reading habit!",
        "habit_name": "Daily Reading",
        "length_days": 21,
        "emoji": "📚",
        "category": "Learning",
    },
    {
        "id": "predefined_7day_meditation",
        "name": "7-Day Mindfulness Challenge",
        "description": "Meditate for 10 minutes daily. Find peace, reduce stress, and improve focus!",
        "habit_name": "Daily Meditation",
        "length_days": 7,
        "emoji": "🧘",
        "category": "Mindfulness",
    },
    {
        "id": "predefined_30day_water",
        "name": "30-Day Hydration Challenge",
        "description": "Drink 8 glasses of water every day. Stay hydrated and feel energized!",
        "habit_name": "Drink Water",
        "length_days": 30,
        "emoji": "💧",
        "category": "Health",
    },
    {
        "id": "predefined_21day_journal",
        "name": "21-Day Journaling Challenge",
        "description": "Write in your journal every day. Reflect, grow, and track your progress!",
        "habit_name": "Daily Journal",
        "length_days": 21,
        "emoji": "✍️",
        "category": "Creative",
    },
    {
        "id": "predefined_30day_walk",
        "name": "30-Day Walking Challenge",
        "description": "Walk 10,000 steps every day. Get moving and improve your health!",
        "habit_name": "Daily Walk",
        "length_days": 30,
        "emoji": "🚶",
        "category": "Fitness",
    },
    {
        "id": "predefined_7day_sleep",
        "name": "7-Day Sleep Challenge",
        "description": "Get 8 hours of sleep every night. Rest well and wake up refreshed!",
        "habit_name": "Quality Sleep",
        "length_days": 7,
        "emoji": "😴",
        "category": "Health",
    },
    {
        "id": "predefined_30day_code",
        "name": "30-Day Coding Challenge",
        "description": "Code for at least 1 hour every day. Level up your programming skills!",
        "habit_name": "Daily Coding",
        "length_days": 30,
        "emoji": "💻",
        "category": "Productivity",
    },
]

CHALLENGE_CATEGORIES = [
    "All", "Fitness", "Health", "Learning", "Work", "Social", "Creative",
    "Daily", "Mindfulness", "Finance", "Productivity",
]
