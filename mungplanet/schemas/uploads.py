from pydantic import BaseModel

class UploadOut(BaseModel):
    image_url: str
