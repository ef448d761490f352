# app/seed.py
from app.core.logging import setup_logging
from app.db import SessionLocal
from app.models import Property
from app.utils.normalize import manwon_to_won

# (제목, 주소, 보증금(만원), 월세(만원), 관리비(만원), 카테고리)
SAMPLE_LISTINGS = [
    ("신촌역 도보 5분 풀옵션 원룸", "서울 서대문구 창천동 18-3", 500, 50, 7, "원룸"),
    ("홍대입구 신축 투룸", "서울 마포구 서교동 395-12", 1000, 85, 10, "투룸"),
    ("안암역 고려대 앞 원룸", "서울 성북구 안암동5가 102-4", 300, 45, None, "원룸"),
    ("서울대입구 여성전용 쉐어하우스", "서울 관악구 봉천동 1598-7", 100, 38, 5, "쉐어하우스"),
    ("성균관대 자연과학캠퍼스 오피스텔", "경기 수원시 장안구 천천동 300-1", 500, 55, 8, "오피스텔"),
]


def create_sample_properties() -> int:
    with SessionLocal() as db:
        if db.query(Property).count():
            print("ℹ️ 매물 데이터가 이미 있어 건너뜀")
            return 0

        print("🏠 샘플 매물 삽입 중...")
        for title, address, deposit, rent, fee, category in SAMPLE_LISTINGS:
            db.add(Property(
                title=title,
                address=address,
                deposit=manwon_to_won(deposit),
                monthly_rent=manwon_to_won(rent),
                maintenance_fee=manwon_to_won(fee),
                description=f"{category} · {address}",
                photos=[],
                category=category,
                is_active=1,
                is_deleted=0,
            ))
        db.commit()

    print(f"✅ 샘플 매물 {len(SAMPLE_LISTINGS)}건 삽입 완료!")
    return len(SAMPLE_LISTINGS)


if __name__ == "__main__":
    setup_logging()
    create_sample_properties()
