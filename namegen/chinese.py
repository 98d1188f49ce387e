"""Chinese names built from surname and given-name character pools."""

from __future__ import annotations

from typing import Optional

from namegen.base import NameGenerator
from namegen.config import ChineseNameConfig, Gender, NameLength, SurnameType
from namegen.console import Console
from namegen.rng import Random


def _pairs(text: str) -> tuple[str, ...]:
    """Cut a run of characters into consecutive two-character entries."""
    chars = iter(text)
    return tuple(first + second for first, second in zip(chars, chars))


SINGLE_SURNAMES: tuple[str, ...] = tuple(
    "王李张刘陈杨赵黄周吴徐孙胡朱高林何郭马罗"
    "梁宋郑谢韩唐冯于董萧程曹袁邓许傅沈曾彭吕"
    "苏卢蒋蔡贾丁魏薛叶阎余潘杜戴夏钟汪田任姜"
    "范方石姚谭廖邹熊金陆郝孔白崔康毛邱秦江史"
    "顾侯邵孟龙万段雷钱汤尹黎易常武乔贺赖龚文"
)

COMPOUND_SURNAMES: tuple[str, ...] = _pairs(
    "欧阳太史端木上官司马东方独孤南宫万俟闻人夏侯诸葛尉迟公羊赫连澹台"
    "皇甫宗政濮阳公冶太叔申屠公孙仲孙轩辕令狐钟离宇文长孙慕容鲜于闾丘"
    "司徒司空亓官司寇仉督子车颛孙端木巫马公西漆雕乐正壤驷公良拓跋夹谷"
    "宰父谷梁晋楚闫法汝鄢涂钦段干百里东郭南门呼延归海羊舌微生岳帅缑亢"
    "况后有琴梁丘左丘东门西门商牟佘佴伯赏南宫墨哈谯笪年爱阳佟第五言福"
)

MALE_SINGLE_CHARS: tuple[str, ...] = tuple(
    "伟强磊军洋勇杰涛明超平刚文华辉鑫斌波宇浩"
    "凯健俊帅晨博豪杰涵默思远航天然安宁乐晨曦"
    "睿智云岚雨虹月星辰阳光德仁义礼智信善良诚"
    "实志恒毅坚勇敢正直公平峰山河海川林木森石"
    "铁钢铜金银玉瑞祥福禄寿喜财运龙虎豹狮鹏鹰"
)

MALE_DOUBLE_NAMES: tuple[str, ...] = _pairs(
    "伟强志刚建国建军建华建平小明大明文华志强志明志远志豪志文志武志勇"
    "俊杰俊豪俊凯俊伟俊明俊峰俊龙俊鹏浩然浩宇浩轩浩文浩明浩瀚浩洋浩泽"
    "天宇天翔天浩天杰天磊天阳天明天睿文博文浩文轩文杰文磊文涛文强文军"
    "梓轩梓浩梓杰梓豪梓睿梓阳梓明梓涛子轩子浩子杰子豪子睿子阳子明子涛"
    "宇航宇轩宇杰宇豪宇睿宇阳宇明宇涛浩杰浩豪浩睿浩阳伟明伟杰伟涛伟军"
)

FEMALE_SINGLE_CHARS: tuple[str, ...] = tuple(
    "芳娜秀英敏静丽兰霞桂艳娟玲欣怡佳悦妍茜琳"
    "璐瑶婷雪冰清洁安宁乐晨曦睿颖慧云岚雨虹月"
    "星辰花草梅菊荷莲蓉桃杏梨樱枫柏柳杨桐凤凰"
    "燕莺蝶蜂雀鹅鸳鸯仙鹤玉珠宝贝金银翠琼琴棋"
    "书画诗词歌赋韵律梦幻灵神奇妙美好甜香纯柔"
)

FEMALE_DOUBLE_NAMES: tuple[str, ...] = _pairs(
    "秀英秀兰桂英小芳小红小丽小美小花美丽美玲美凤美兰美华美娟美娜美婷"
    "秀丽秀娟秀娜秀婷秀芳秀华秀玲秀敏桂兰桂华桂娟桂娜桂婷桂芳桂玲桂敏"
    "梦琪梦萱梦洁梦瑶梦婷梦娜梦娟梦华思琪思萱思洁思瑶思婷思娜思娟思华"
    "雨琪雨萱雨洁雨瑶雨婷雨娜雨娟雨华雪琪雪萱雪洁雪瑶雪婷雪娜雪娟雪华"
    "欣怡欣然欣悦欣妍欣琳欣瑶欣婷欣娜雅琪雅萱雅洁雅瑶雅婷雅娜雅娟雅华"
)

NEUTRAL_SINGLE_CHARS: tuple[str, ...] = tuple(
    "文华明亮光辉耀灿烂晨曦晓阳月星辰天地人和"
    "安宁平静顺畅通达远近高低上下中正直公平公"
    "道德仁义礼智信善良诚实真假虚实空满盈亏损"
    "益增减多少大小长短宽窄厚薄深浅新旧老幼生"
    "死存亡兴衰盛败成败得失取舍进退升降出入来"
)

NEUTRAL_DOUBLE_NAMES: tuple[str, ...] = _pairs(
    "文华文辉文明文亮文光文灿文晨文晓华文辉文明文亮文光文灿文晨文晓文"
    "光华光辉光明光亮光灿光晨光晓光阳辉华辉光辉明辉亮辉灿辉晨辉晓辉阳"
    "明华明光明辉明亮明灿明晨明晓明阳亮华亮光亮辉亮明亮灿亮晨亮晓亮阳"
    "晨华晨光晨辉晨明晨亮晨灿晨阳晨月晓华晓光晓辉晓明晓亮晓灿晓阳晓月"
    "安华安光安辉安明安亮安晨安晓安阳宁华宁光宁辉宁明宁亮宁晨宁晓宁阳"
)

_SINGLE_CHARS = {
    Gender.MALE: MALE_SINGLE_CHARS,
    Gender.FEMALE: FEMALE_SINGLE_CHARS,
    Gender.MIXED: NEUTRAL_SINGLE_CHARS,
}

_DOUBLE_NAMES = {
    Gender.MALE: MALE_DOUBLE_NAMES,
    Gender.FEMALE: FEMALE_DOUBLE_NAMES,
    Gender.MIXED: NEUTRAL_DOUBLE_NAMES,
}

_COMPOUND_SURNAME_CHANCE = 0.2


class ChineseNameGenerator(NameGenerator):
    """Builds Chinese names according to a ChineseNameConfig."""

    def __init__(self, config: Optional[ChineseNameConfig] = None, rng: Optional[Random] = None) -> None:
        self.config = config if config is not None else ChineseNameConfig()
        self._rng = rng

    @property
    def _random(self) -> Random:
        return self._rng if self._rng is not None else Random.instance()

    def generate(self) -> str:
        """Return one name using the generator's own configuration."""
        return self.generate_with_config(self.config)

    def style_name(self) -> str:
        return "中文名"

    def generate_with_config(self, config: ChineseNameConfig) -> str:
        """Return one name built according to `config`."""
        surname = self._surname(config.surname_type)
        return surname + self._given_name(config.gender, config.name_length)

    def generate_multiple_with_config(
        self, config: ChineseNameConfig, console: Optional[Console] = None
    ) -> int:
        """Print `config.count` numbered names and return how many were produced."""
        console = console if console is not None else Console()
        if config.count <= 0:
            console.print_error("生成数量必须大于0")
            return 0

        console.print_info(f"生成 {config.count} 个{config.description()}:")
        console.print_line("-")

        produced = 0
        for number in range(1, config.count + 1):
            try:
                name = self.generate_with_config(config)
            except Exception as exc:
                console.print_error(f"生成第 {number} 个姓名时出错: {exc}")
                continue
            console.println(f"  {number}. {name}")
            produced += 1

        console.print_line("-")
        return produced

    def _surname(self, surname_type: SurnameType) -> str:
        rng = self._random
        if surname_type is SurnameType.SINGLE:
            return rng.choice(SINGLE_SURNAMES)
        if surname_type is SurnameType.COMPOUND:
            return rng.choice(COMPOUND_SURNAMES)
        if rng.next_double() < _COMPOUND_SURNAME_CHANCE:
            return rng.choice(COMPOUND_SURNAMES)
        return rng.choice(SINGLE_SURNAMES)

    def _resolve_gender(self, gender: Gender) -> Gender:
        if gender is Gender.MIXED:
            return Gender.MALE if self._random.next_double() < 0.5 else Gender.FEMALE
        return gender

    def _given_name(self, gender: Gender, length: NameLength) -> str:
        if length is NameLength.MIXED:
            length = NameLength.SINGLE if self._random.next_double() < 0.5 else NameLength.DOUBLE
        if length is NameLength.SINGLE:
            return self._single_char_name(gender)
        return self._double_char_name(gender)

    def _single_char_name(self, gender: Gender) -> str:
        actual = self._resolve_gender(gender)
        return self._random.choice(_SINGLE_CHARS[actual])

    def _double_char_name(self, gender: Gender) -> str:
        actual = self._resolve_gender(gender)
        rng = self._random
        singles = _SINGLE_CHARS[actual]
        doubles = _DOUBLE_NAMES[actual]
        if rng.next_double() < 0.5 and doubles:
            return rng.choice(doubles)
        first = rng.choice(singles)
        return first + rng.choice(singles)