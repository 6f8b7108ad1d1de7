"""Response status codes and their Chinese descriptions."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Code", "text"]


class Code(IntEnum):
    """Status codes returned in response bodies."""

    SUCCESS = 0
    FAILED = 4000
    CAPTCHA_FAILED = 4001
    PARAMS_FAILED = 4002
    LOGIN_FAILED = 4003
    TOKEN_FAILED = 4004
    TOKEN_EXPIRED = 4005
    CASBIN_FAILED = 4006
    CAPTCHA_VERIFY_FAILED = 4007
    REGISTER_FAILED = 4008
    MENU_LIST_FAILED = 4009
    CASBIN_ADD_FAILED = 4010
    CASBIN_DEL_FAILED = 4011
    CASBIN_UPDATE_FAILED = 4012
    CASBIN_LIST_FAILED = 4013
    RATE_LIMIT_ALLOW_FAILED = 4014
    FILE_WITH_EXCEL_FAILED = 4015
    FILE_REPORT_FAILED = 4016
    FILE_OPEN_FAILED = 4017
    GET_USER_INFO_FAILED = 4018
    UPDATE_USER_INFO_FAILED = 4019
    GET_CASBIN_LIST_FAILED = 4020
    NOT_ADMIN_ID = 4021
    SET_CASBIN_FAILED = 4022
    GET_DICT_LIST_FAILED = 4023
    GET_SETTINGS_FAILED = 4024
    UPDATE_SETTINGS_FAILED = 4025
    TOKEN_VALIDATE_FAILED = 4026
    UPDATE_PASSWORD_FAILED = 4027
    RATE_LIMIT_ALLOW_ERR_FAILED = 4028
    DEBUG_PERF_FAILED = 4029
    WEB_SOCKET_CREATE_CONN_FAILED = 4030
    PARAMS_ANALYSIS_FAILED = 4031
    SAME_DATA_SAVE_FAILED = 4032

    @property
    def text(self) -> str:
        """The description of this code."""
        return text(self)


_ZH_CN_TEXT: dict[int, str] = {
    Code.SUCCESS: "成功",
    Code.FAILED: "系统错误",
    Code.CAPTCHA_FAILED: "验证码获取失败",
    Code.PARAMS_FAILED: "参数校验错误",
    Code.TOKEN_FAILED: "token无效",
    Code.LOGIN_FAILED: "登录失败",
    Code.CASBIN_FAILED: "权限不足",
    Code.REGISTER_FAILED: "注册失败",
    Code.CAPTCHA_VERIFY_FAILED: "验证码校验失败",
    Code.MENU_LIST_FAILED: "获取路由菜单失败",
    Code.CASBIN_ADD_FAILED: "权限添加失败",
    Code.CASBIN_DEL_FAILED: "权限删除失败",
    Code.CASBIN_UPDATE_FAILED: "权限更新失败",
    Code.CASBIN_LIST_FAILED: "权限列表失败",
    Code.RATE_LIMIT_ALLOW_FAILED: "超出请求频率限制",
    Code.FILE_WITH_EXCEL_FAILED: "不是excel文件",
    Code.FILE_REPORT_FAILED: "文件上传失败",
    Code.FILE_OPEN_FAILED: "文件打开失败",
    Code.GET_USER_INFO_FAILED: "获取用户信息失败",
    Code.UPDATE_USER_INFO_FAILED: "更新用户信息失败",
    Code.GET_CASBIN_LIST_FAILED: "获取权限表信息失败",
    Code.NOT_ADMIN_ID: "无权限操作该接口",
    Code.SET_CASBIN_FAILED: "更新权限失败",
    Code.GET_DICT_LIST_FAILED: "获取字典序失败",
    Code.GET_SETTINGS_FAILED: "获取layout配置失败",
    Code.UPDATE_SETTINGS_FAILED: "设置layout配置失败",
    Code.TOKEN_VALIDATE_FAILED: "token解析失败",
    Code.UPDATE_PASSWORD_FAILED: "更新用户密码失败",
    Code.RATE_LIMIT_ALLOW_ERR_FAILED: "请求频率限制接口报错",
    Code.DEBUG_PERF_FAILED: "性能测试失败",
    Code.WEB_SOCKET_CREATE_CONN_FAILED: "创建websocket连接失败",
    Code.PARAMS_ANALYSIS_FAILED: "参数解析异常",
    Code.SAME_DATA_SAVE_FAILED: "已存在相同数据，保存失败",
}


def text(code: int) -> str:
    """Return the description for ``code``, or an empty string if it has none."""
    return _ZH_CN_TEXT.get(int(code), "")