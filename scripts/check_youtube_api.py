"""
Smoke check for the YouTube Data API key
Run this to verify the key in .env works before starting the server
"""
import os
import sys
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

api_key = os.getenv('YOUTUBE_API_KEY')

if not api_key:
    print("ERROR: YOUTUBE_API_KEY not found in .env file")
    print("\nPlease:")
    print("1. Copy .env.example to .env")
    print("2. Add your YouTube API key to the YOUTUBE_API_KEY variable")
    print("3. Get an API key from: https://console.cloud.google.com/apis/credentials")
    sys.exit(1)

print(f"API Key found: {api_key[:6]}...{api_key[-4:]}")
print("\nTesting YouTube API connection...")

from ytclone.core.exceptions import AppError
from ytclone.core.youtube_client import YouTubeClient
from ytclone.services.video_service import VideoService

video_service = VideoService(YouTubeClient(api_key=api_key))

try:
    print("\nSearch...")
    videos = video_service.search("never gonna give you up", max_results=3)
    print(f"  {len(videos)} results")
    for video in videos:
        print(f"  - {video['id']}: {video['title']}")

    print("\nVideo details...")
    video = video_service.get_video("dQw4w9WgXcQ")
    print(f"  Title: {video['title']}")
    print(f"  Duration: {video['duration']}")
    print(f"  Views: {video['viewCount']}")

    print("\nPopular chart...")
    popular = video_service.popular(max_results=3)
    print(f"  {len(popular)} videos")
except AppError as e:
    print(f"\nERROR: {e.message}")
    if e.details:
        print(f"  {e.details}")
    print("\nPossible issues:")
    print("1. Invalid API key")
    print("2. YouTube Data API v3 not enabled in Google Cloud Console")
    print("3. API quota exceeded")
    sys.exit(1)

print("\nYouTube API integration is working.")
print("Start the server with: python -m ytclone")
