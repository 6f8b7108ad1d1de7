"""Game client constants: phases, queues, servers, tiers and the champion list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "LOL_UX_PROCESS_NAME",
    "GameFlowPhase",
    "SGP_SERVER_ID_TO_NAME",
    "TIER_EN_TO_CN",
    "QUEUE_TYPE_TO_CN",
    "QUEUE_ID_TO_CN",
    "QUEUE_SOLO_5X5",
    "QUEUE_MATCH",
    "QUEUE_FLEX",
    "QUEUE_ARAM",
    "QUEUE_MATCH2",
    "QUEUE_OD",
    "QUEUE_TFT",
    "QUEUE_URF",
    "MATCHMAKING",
    "CHAMP_SELECT",
    "READY_CHECK",
    "IN_PROGRESS",
    "END_OF_GAME",
    "LOBBY",
    "GAME_START",
    "NONE",
    "RECONNECT",
    "WAITING_FOR_STATS",
    "PRE_END_OF_GAME",
    "WATCH_IN_PROGRESS",
    "TERMINATED_IN_ERROR",
    "ChampionOption",
    "CHAMPION_OPTIONS",
    "ROBOT_PUUID",
    "ITEM_ICON_MAP",
    "CHAMP_ICON_MAP",
    "SPELL_ICON_MAP",
    "PROFILE_ICON_MAP",
    "MAP_ICON",
    "champion_by_id",
    "search_champions",
]

LOL_UX_PROCESS_NAME = "LeagueClientUx.exe"


class GameFlowPhase(str, Enum):
    """Phases of the client's game flow."""

    NONE = "None"
    LOBBY = "Lobby"
    MATCHMAKING = "Matchmaking"
    CHAMP_SELECT = "ChampSelect"
    IN_GAME = "InProgress"
    END_OF_GAME = "EndOfGame"


SGP_SERVER_ID_TO_NAME: dict[str, str] = {
    "HN1": "艾欧尼亚",
    "HN10": "黑色玫瑰",
    "TJ100": "联盟四区",
    "TJ101": "联盟五区",
    "NJ100": "联盟一区",
    "GZ100": "联盟二区",
    "CQ100": "联盟三区",
    "BGP2": "峡谷之巅",
    "PBE": "体验服",
    "TW2": "台湾",
    "SG2": "新加坡",
    "PH2": "菲律宾",
    "VN2": "越南",
    "": "暂无",
}

TIER_EN_TO_CN: dict[str, str] = {
    "UNRANKED": "无",
    "IRON": "坚韧黑铁",
    "BRONZE": "英勇黄铜",
    "SILVER": "不屈白银",
    "GOLD": "荣耀黄金",
    "PLATINUM": "华贵铂金",
    "EMERALD": "流光翡翠",
    "DIAMOND": "璀璨钻石",
    "MASTER": "超凡大师",
    "GRANDMASTER": "傲世宗师",
    "CHALLENGER": "最强王者",
    "": "无",
}

QUEUE_TYPE_TO_CN: dict[str, str] = {
    "RANKED_SOLO_5x5": "单双排",
    "RANKED_FLEX_SR": "灵活组排",
    "": "其他",
}

QUEUE_ID_TO_CN: dict[int, str] = {
    420: "单双排",
    430: "匹配",
    440: "灵活排",
    450: "大乱斗",
    490: "匹配",
    890: "人机",
    900: "无限乱斗",
    1700: "斗魂竞技场",
    1900: "无限火力",
    0: "其他",
}

QUEUE_SOLO_5X5 = 420
QUEUE_MATCH = 430
QUEUE_FLEX = 440
QUEUE_ARAM = 450
QUEUE_MATCH2 = 490
QUEUE_OD = 900
QUEUE_TFT = 1700
QUEUE_URF = 1900

# Client game states
MATCHMAKING = "Matchmaking"
CHAMP_SELECT = "ChampSelect"
READY_CHECK = "ReadyCheck"
IN_PROGRESS = "InProgress"
END_OF_GAME = "EndOfGame"
LOBBY = "Lobby"
GAME_START = "GameStart"
NONE = "None"
RECONNECT = "Reconnect"
WAITING_FOR_STATS = "WaitingForStats"
PRE_END_OF_GAME = "PreEndOfGame"
WATCH_IN_PROGRESS = "WatchInProgress"
TERMINATED_IN_ERROR = "TerminatedInError"

ROBOT_PUUID = "00000000-0000-0000-0000-000000000000"

ITEM_ICON_MAP: dict[int, str] = {}
CHAMP_ICON_MAP: dict[int, str] = {}
SPELL_ICON_MAP: dict[int, str] = {}
PROFILE_ICON_MAP: dict[int, str] = {}
MAP_ICON: dict[int, str] = {}


@dataclass(frozen=True)
class ChampionOption:
    """A champion entry: title, id, real name and nicknames separated by ``|``."""

    label: str
    value: int
    real_name: str = ""
    nickname: str = ""


_C = ChampionOption

CHAMPION_OPTIONS: tuple[ChampionOption, ...] = (
    _C("全部", 0, "", ""),
    _C("黑暗之女", 1, "安妮", "火女"),
    _C("狂战士", 2, "奥拉夫", "大头"),
    _C("正义巨像", 3, "加里奥", "城墙"),
    _C("卡牌大师", 4, "崔斯特", "卡牌"),
    _C("德邦总管", 5, "赵信", "菊花信|赵神王"),
    _C("无畏战车", 6, "厄加特", "螃蟹"),
    _C("诡术妖姬", 7, "乐芙兰", "LB"),
    _C("猩红收割者", 8, "弗拉基米尔", "吸血鬼"),
    _C("远古恐惧", 9, "费德提克", "稻草人"),
    _C("正义天使", 10, "凯尔", "天使"),
    _C("无极剑圣", 11, "易", ""),
    _C("牛头酋长", 12, "阿利斯塔", "牛头"),
    _C("符文法师", 13, "瑞兹", "光头"),
    _C("亡灵战神", 14, "赛恩", "老司机"),
    _C("战争女神", 15, "希维尔", "轮子妈"),
    _C("众星之子", 16, "索拉卡", "奶妈"),
    _C("迅捷斥候", 17, "提莫", "蘑菇"),
    _C("麦林炮手", 18, "崔丝塔娜", "小炮"),
    _C("祖安怒兽", 19, "沃里克", "狼人"),
    _C("雪原双子", 20, "努努和威朗普", "雪人"),
    _C("赏金猎人", 21, "厄运小姐", "女枪"),
    _C("寒冰射手", 22, "艾希", "刮痧女王"),
    _C("蛮族之王", 23, "泰达米尔", "蛮王"),
    _C("武器大师", 24, "贾克斯", "武器"),
    _C("堕落天使", 25, "莫甘娜", ""),
    _C("时光守护者", 26, "基兰", "时光老头"),
    _C("炼金术士", 27, "辛吉德", "炼金"),
    _C("痛苦之拥", 28, "伊芙琳", "寡妇"),
    _C("瘟疫之源", 29, "图奇", "老鼠"),
    _C("死亡颂唱者", 30, "卡尔萨斯", "死歌"),
    _C("虚空恐惧", 31, "科加斯", "大虫子"),
    _C("殇之木乃伊", 32, "阿木木", "木乃伊"),
    _C("披甲龙龟", 33, "拉莫斯", "龙龟"),
    _C("冰晶凤凰", 34, "艾尼维亚", "凤凰"),
    _C("恶魔小丑", 35, "萨科", "小丑"),
    _C("祖安狂人", 36, "蒙多医生", "蒙多"),
    _C("琴瑟仙女", 37, "娑娜", "琴女"),
    _C("虚空行者", 38, "卡萨丁", "电耗子"),
    _C("刀锋舞者", 39, "卡特琳娜", "卡特"),
    _C("风暴之怒", 40, "杰娜", "风女"),
    _C("海洋之灾", 41, "普朗克", "船长"),
    _C("英勇投弹手", 42, "库奇", "飞机"),
    _C("天启者", 43, "卡尔玛", "扇子妈"),
    _C("瓦洛兰之盾", 44, "塔里克", "宝石"),
    _C("邪恶小法师", 45, "维迦", "小法"),
    _C("巨魔之王", 48, "特朗德尔", "巨魔"),
    _C("诺克萨斯统领", 50, "斯维因", "乌鸦"),
    _C("皮城女警", 51, "凯特琳", "女警"),
    _C("蒸汽机器人", 53, "布里茨", "机器人"),
    _C("熔岩巨兽", 54, "墨菲特", "石头人"),
    _C("不祥之刃", 55, "卡特琳娜", "卡特"),
    _C("永恒梦魇", 56, "魔腾", "梦魇"),
    _C("扭曲树精", 57, "茂凯", "大树"),
    _C("荒漠屠夫", 58, "雷克顿", "鳄鱼"),
    _C("德玛西亚皇子", 59, "嘉文四世", "皇子"),
    _C("蜘蛛女皇", 60, "伊莉丝", "蜘蛛"),
    _C("发条魔灵", 61, "奥莉安娜", "发条"),
    _C("齐天大圣", 62, "孙悟空", "猴子"),
    _C("复仇焰魂", 63, "布兰德", "火男"),
    _C("盲僧", 64, "李青", "瞎子"),
    _C("暗夜猎手", 67, "薇恩", "VN|uzi|UZI"),
    _C("机械公敌", 68, "兰博", "机器人"),
    _C("魔蛇之拥", 69, "卡西奥佩娅", "蛇女"),
    _C("上古领主", 72, "斯卡纳", "蝎子"),
    _C("大发明家", 74, "海默丁格", "大头"),
    _C("沙漠死神", 75, "内瑟斯", "狗头"),
    _C("狂野女猎手", 76, "奈德丽", "豹女"),
    _C("兽灵行者", 77, "乌迪尔", "德鲁伊"),
    _C("圣锤之毅", 78, "波比", "锤石"),
    _C("酒桶", 79, "古拉加斯", "酒桶"),
    _C("不屈之枪", 80, "潘森", "斯巴达"),
    _C("探险家", 81, "伊泽瑞尔", "EZ"),
    _C("铁铠冥魂", 82, "莫德凯撒", "铁男"),
    _C("牧魂人", 83, "约里克", "掘墓者"),
    _C("离群之刺", 84, "阿卡丽", "阿卡丽"),
    _C("狂暴之心", 85, "凯南", "电耗子"),
    _C("德玛西亚之力", 86, "盖伦", "草丛伦"),
    _C("曙光女神", 89, "蕾欧娜", "日女"),
    _C("虚空先知", 90, "玛尔扎哈", "蚂蚱"),
    _C("刀锋之影", 91, "泰隆", "男刀"),
    _C("放逐之刃", 92, "锐雯", "兔女郎"),
    _C("深渊巨口", 96, "克格莫", "大嘴"),
    _C("暮光之眼", 98, "慎", "慎"),
    _C("光辉女郎", 99, "拉克丝", "光辉"),
    _C("远古巫灵", 101, "泽拉斯", "死亡射线|挠头怪"),
    _C("龙血武姬", 102, "希瓦娜", "龙女"),
    _C("九尾妖狐", 103, "阿狸", "狐狸"),
    _C("法外狂徒", 104, "格雷福斯", "男枪"),
    _C("潮汐海灵", 105, "菲兹", "小鱼人"),
    _C("不灭狂雷", 106, "沃利贝尔", "雷熊"),
    _C("傲之追猎者", 107, "雷恩加尔", "狮子狗"),
    _C("惩戒之箭", 110, "韦鲁斯", "维鲁斯"),
    _C("深海泰坦", 111, "诺提勒斯", "泰坦"),
    _C("奥术先驱", 112, "维克托", "三只手"),
    _C("北地之怒", 113, "瑟庄妮", "猪妹"),
    _C("无双剑姬", 114, "菲奥娜", "剑姬"),
    _C("爆破鬼才", 115, "吉格斯", "炸弹人"),
    _C("仙灵女巫", 117, "璐璐", "露露"),
    _C("荣耀行刑官", 119, "德莱文", "德莱文"),
    _C("战争之影", 120, "赫卡里姆", "人马"),
    _C("虚空掠夺者", 121, "卡兹克", "螳螂"),
    _C("诺克萨斯之手", 122, "德莱厄斯", "诺手"),
    _C("未来守护者", 126, "杰斯", "杰斯"),
    _C("冰霜女巫", 127, "丽桑卓", "冰女"),
    _C("皎月女神", 131, "戴安娜", "皎月"),
    _C("德玛西亚之翼", 133, "奎因", "鸟人"),
    _C("暗黑元首", 134, "辛德拉", "球女"),
    _C("铸星龙王", 136, "奥瑞利安·索尔", "龙王"),
    _C("影流之镰", 141, "凯隐&拉亚斯特", ""),
    _C("暮光星灵", 142, "佐伊", "佐a"),
    _C("荆棘之兴", 143, "婕拉", "植物人"),
    _C("虚空之女", 145, "卡莎", ""),
    _C("星籁歌姬", 147, "萨勒芬妮", "轮椅人"),
    _C("迷失之牙", 150, "纳尔", ""),
    _C("生化魔人", 154, "扎克", "粑粑人"),
    _C("疾风剑豪", 157, "亚索", "索子哥|孤儿索"),
    _C("虚空之眼", 161, "维克兹", "大眼"),
    _C("岩雀", 163, "塔莉垭", ""),
    _C("青钢影", 164, "卡米尔", ""),
    _C("影哨", 166, "阿克尚", ""),
    _C("虚空女皇", 200, "卑尔维斯", "阿尔卑斯|棒棒糖"),
    _C("弗雷尔卓德之心", 201, "布隆", ""),
    _C("戏命师", 202, "烬", "瘸子"),
    _C("永猎双子", 203, "千珏", ""),
    _C("祖安花火", 221, "泽丽", ""),
    _C("暴走萝莉", 222, "金克丝", ""),
    _C("河流之王", 223, "塔姆", ""),
    _C("狂厄蔷薇", 233, "狱卒", ""),
    _C("破败之王", 234, "佛耶戈", ""),
    _C("涤魂圣枪", 235, "塞纳", ""),
    _C("圣枪游侠", 236, "卢锡安", ""),
    _C("影流之主", 238, "劫", "幽默飞镖人"),
    _C("暴怒骑士", 240, "克烈", ""),
    _C("时间刺客", 245, "艾克", ""),
    _C("元素女皇", 246, "奇亚娜", "超模"),
    _C("皮城执法官", 254, "蔚", ""),
    _C("暗裔剑魔", 266, "亚托克斯", ""),
    _C("唤潮鲛姬", 267, "娜美", ""),
    _C("沙漠皇帝", 268, "阿兹尔", "黄鸡"),
    _C("魔法猫咪", 350, "悠米", ""),
    _C("沙漠玫瑰", 360, "莎米拉", ""),
    _C("魂锁典狱长", 412, "锤石", ""),
    _C("海兽祭司", 420, "俄洛伊", "触手妈"),
    _C("虚空遁地兽", 421, "雷克赛", "挖掘机"),
    _C("翠神", 427, "艾翁", "小树"),
    _C("复仇之矛", 429, "卡莉丝塔", ""),
    _C("星界游神", 432, "巴德", ""),
    _C("幻翎", 497, "洛", ""),
    _C("逆羽", 498, "霞", ""),
    _C("山隐之焰", 516, "奥恩", "山羊"),
    _C("解脱者", 517, "塞拉斯", ""),
    _C("万花通灵", 518, "妮蔻", ""),
    _C("残月之肃", 523, "厄斐琉斯", "efls"),
    _C("镕铁少女", 526, "芮尔", ""),
    _C("血港鬼影", 555, "派克", ""),
    _C("愁云使者", 711, "薇古斯", ""),
    _C("封魔剑魂", 777, "永恩", ""),
    _C("铁血狼母", 799, "安蓓萨", ""),
    _C("流光镜影", 800, "梅尔", "三体人"),
    _C("腕豪", 875, "瑟提", ""),
    _C("含羞蓓蕾", 876, "莉莉娅", ""),
    _C("灵罗娃娃", 887, "格温", ""),
    _C("炼金男爵", 888, "烈娜塔・戈拉斯克", ""),
    _C("双界灵兔", 893, "阿萝拉", "兔子"),
    _C("不羁之悦", 895, "尼菈", "水米拉|水弥拉"),
    _C("纳祖芒荣耀", 897, "奎桑提", "黑哥"),
    _C("炽炎雏龙", 901, "斯莫德", "小火龙"),
    _C("明烛", 902, "米利欧", "顶真|丁真"),
    _C("异画师", 910, "慧", "毛笔人"),
    _C("百裂冥犬", 950, "纳亚菲利", "狼狗|狗比"),
)

del _C

_BY_ID: dict[int, ChampionOption] = {option.value: option for option in CHAMPION_OPTIONS}


def champion_by_id(champion_id: int) -> ChampionOption:
    """Return the champion with ``champion_id``; raise KeyError if there is none."""
    try:
        return _BY_ID[champion_id]
    except KeyError:
        raise KeyError(f"unknown champion id {champion_id}") from None


def _matches(option: ChampionOption, needle: str) -> bool:
    names = [option.label, option.real_name, *option.nickname.split("|")]
    return any(needle in name.casefold() for name in names if name)


def search_champions(keyword: str) -> list[ChampionOption]:
    """Return champions whose title, real name or a nickname contains ``keyword``.

    Matching ignores case; an empty or blank keyword returns every option.
    """
    needle = keyword.strip().casefold()
    if not needle:
        return list(CHAMPION_OPTIONS)
    return [option for option in CHAMPION_OPTIONS if _matches(option, needle)]