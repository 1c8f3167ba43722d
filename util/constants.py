class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    API_KEY = V1 + "/api-key"
    API_KEY_EDIT = API_KEY + "/edit"
    GENERATE_LESSON_PLAN = V1 + "/lesson-plans/generate"


class ExternalURIs:
    GEMINI_API = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODELS = GEMINI_API + "/models"
