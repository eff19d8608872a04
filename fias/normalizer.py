"""
Нормализация названий типов адресных объектов
"""
import re
import unicodedata
from typing import Dict, List


# Каноническая форма (сокращение ГАР) -> варианты написания
TYPE_ALIASES: Dict[str, List[str]] = {
	# === СУБЪЕКТЫ ===
	"обл": ["область", "обл."],
	"край": ["край", "кр."],
	"респ": ["республика", "респ."],
	"ао": ["автономный округ", "авт. округ", "АО"],
	"аобл": ["автономная область", "Аобл", "а.обл"],
	"г.ф.з": ["город федерального значения", "г.ф.з."],

	# === АДМИНИСТРАТИВНЫЕ И МУНИЦИПАЛЬНЫЕ ЕДИНИЦЫ ===
	"р-н": ["район", "р-н", "рн", "р-он"],
	"м.р-н": ["муниципальный район", "м.р-н", "мр", "м-р"],
	"г.о": ["городской округ", "г.о.", "го", "г/о"],
	"м.о": ["муниципальный округ", "м.о.", "м/о"],
	"вн.тер.г": ["внутригородская территория", "вн.тер.г.", "вн/тер-г"],
	"г.п": ["городское поселение", "г.п.", "г/п"],
	"с.п": ["сельское поселение", "с.п.", "с/п"],
	"с/с": ["сельсовет", "сельский совет", "с.с."],
	"с/о": ["сельский округ", "с.о."],
	"с/а": ["сельская администрация"],
	"волость": ["волость", "вол."],
	"у": ["улус"],
	"тер": ["территория", "тер.", "терр."],

	# === НАСЕЛЁННЫЕ ПУНКТЫ ===
	"г": ["город", "г.", "гор."],
	"пгт": ["поселок городского типа", "п.г.т."],
	"рп": ["рабочий поселок", "р.п."],
	"кп": ["курортный поселок"],
	"дп": ["дачный поселок"],
	"п": ["поселок", "пос.", "пос", "п."],
	"с": ["село", "с."],
	"д": ["деревня", "дер.", "д."],
	"х": ["хутор", "х."],
	"ст-ца": ["станица", "ст-ца"],
	"сл": ["слобода", "сл."],
	"м": ["местечко"],
	"рзд": ["разъезд"],
	"ст": ["станция"],
	"аул": ["аул"],
	"нп": ["населенный пункт", "н.п."],
	"п. ст": ["поселок при станции", "п/ст", "п. ст."],
	"ж/д ст": ["железнодорожная станция", "жд ст", "ж/д ст."],

	# === ЭЛЕМЕНТЫ ПЛАНИРОВОЧНОЙ СТРУКТУРЫ И ДОП. ТЕРРИТОРИИ ===
	"мкр": ["микрорайон", "мкр.", "мкрн", "мкр-н"],
	"кв-л": ["квартал", "кв-л."],
	"снт": ["садовое некоммерческое товарищество", "тер. снт", "тер снт"],
	"днт": ["дачное некоммерческое товарищество", "тер. днт"],
	"гск": ["гаражно-строительный кооператив", "тер. гск"],
	"промзона": ["промышленная зона", "пром. зона"],
	"уч-к": ["участок"],

	# === ЭЛЕМЕНТЫ УЛИЧНО-ДОРОЖНОЙ СЕТИ ===
	"ул": ["улица", "ул."],
	"пер": ["переулок", "пер."],
	"пр-кт": ["проспект", "просп.", "пр-т"],
	"б-р": ["бульвар", "бул."],
	"пр-д": ["проезд"],
	"пл": ["площадь", "пл."],
	"ш": ["шоссе", "ш."],
	"наб": ["набережная", "наб."],
	"туп": ["тупик", "туп."],
	"аллея": ["ал.", "ал"],
	"линия": ["лин."],
	"тракт": ["тракт"],
	"проулок": ["проул."],
	"дор": ["дорога", "дор."],
	"км": ["километр", "км."],
	"сквер": ["сквер"],
	"въезд": ["въезд"],
	"спуск": ["спуск"],
	"кольцо": ["кольцо"],
	"мгстр": ["магистраль"],
}


def normalize_type_name(text: str) -> str:
	"""Нормализация названия типа: регистр, ё, пробелы и точка в конце"""
	if not text:
		return ""

	# Unicode NFC нормализация
	text = unicodedata.normalize('NFC', text)

	text = text.lower()
	text = text.replace('ё', 'е')

	# Схлопывание пробелов
	text = re.sub(r'\s+', ' ', text).strip()

	# "г." -> "г", "г.о." -> "г.о", внутренние точки сохраняем
	return text.rstrip('.').strip()


def build_reverse_alias_map(canonical_to_aliases: Dict[str, List[str]]) -> Dict[str, str]:
	"""Вариант написания -> каноническая форма"""
	rev: Dict[str, str] = {}
	for canon, aliases in canonical_to_aliases.items():
		rev[normalize_type_name(canon)] = canon
		for alias in aliases:
			key = normalize_type_name(alias)
			if key:
				rev.setdefault(key, canon)
	return rev


_REVERSE_TYPE_ALIASES = build_reverse_alias_map(TYPE_ALIASES)


def canonical_type_name(text: str) -> str:
	"""Каноническая форма типа; неизвестные варианты возвращаются нормализованными"""
	key = normalize_type_name(text)
	return _REVERSE_TYPE_ALIASES.get(key, key)
