import uvicorn
from ytclone.config import settings

if __name__ == "__main__":
    uvicorn.run("ytclone.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
