"""Common constants shared across the credential proxy modules."""

LKE_ENDPOINT = "lke.tencentcloudapi.com"
LKE_REGION = "ap-guangzhou"

TYPE_KEY_REALTIME = "realtime"
TYPE_KEY_OFFLINE = "offline"

ENV_SECRET_ID = "TENCENT_SECRET_ID"
ENV_SECRET_KEY = "TENCENT_SECRET_KEY"
ENV_BOT_BIZ_ID = "TENCENT_BOT_BIZ_ID"
ENV_BOT_APP_ID = "TENCENT_BOT_APP_ID"
ENV_REGION = "TENCENT_REGION"
ENV_ENDPOINT = "TENCENT_LKE_ENDPOINT"
ENV_LOG_LEVEL = "LOG_LEVEL"

SSM_PARAM_SUFFIX = "_SSM_PARAM"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
