from dotenv import load_dotenv

# Pick up REDDIT_CLIENT_ID, REDDIT_CLIENT_SECRET and PORT from a local .env
# before config.load_settings() reads os.environ. Real environment variables win.
load_dotenv()
