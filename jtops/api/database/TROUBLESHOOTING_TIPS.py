"""Fixed troubleshooting tips shown for any probe failure."""

TROUBLESHOOTING_TIPS: list[str] = [
    "Check if MONGODB_URI is set in your .env file",
    "Verify your MongoDB Atlas connection string",
    "Make sure your IP is whitelisted in MongoDB Atlas",
    "Check if your MongoDB Atlas cluster is running",
]
